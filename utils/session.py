"""
Ouidah Flow Map — Map Session
Everything a render needs, built once after both datasets are loaded.
"""
from dataclasses import dataclass, field
from typing import Callable

import pandas as pd

import config
from utils.data_prep import Origin
from utils.scales import ScaleState, create_line_width_fn, create_size_scale


@dataclass(frozen=True, eq=False)
class MapSession:
    origin: Origin
    records: pd.DataFrame
    scale_state: ScaleState
    size_scale: Callable[[float], float] = field(repr=False)
    line_width: Callable[[float], float] = field(repr=False)

    @property
    def bounds(self) -> list[list[float]]:
        """[[south, west], [north, east]] over the origin and every port."""
        lats = [self.origin.lat, *self.records["lat"].tolist()]
        lons = [self.origin.lon, *self.records["lon"].tolist()]
        return [[min(lats), min(lons)], [max(lats), max(lons)]]

    @property
    def total_volume(self) -> float:
        return float(self.records["volume"].sum())


def build_session(origin: Origin, records: pd.DataFrame) -> MapSession:
    """
    Compute the shared scale range (origin included) and the two scale
    functions, then freeze them together with the data.
    """
    values = [*records["volume"].tolist(), origin.volume]
    state = ScaleState.from_values(values)

    size_scale = create_size_scale(
        state.max_value,
        min_radius=config.MARKER_MIN_RADIUS,
        max_radius=config.MARKER_MAX_RADIUS,
    )
    line_width = create_line_width_fn(
        state.min_positive,
        state.max_value,
        min_width=config.LINE_MIN_WIDTH,
        max_width=config.LINE_MAX_WIDTH,
    )
    return MapSession(
        origin=origin,
        records=records,
        scale_state=state,
        size_scale=size_scale,
        line_width=line_width,
    )
