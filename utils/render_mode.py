"""
Ouidah Flow Map — Render Mode Selection
Three zoom tiers: every port when zoomed in, k-means clusters when zoomed out.
"""
from dataclasses import dataclass

import config

DETAILED = "detailed"
AGGREGATED = "aggregated"


@dataclass(frozen=True)
class RenderMode:
    kind: str
    cluster_count: int | None = None

    @classmethod
    def detailed(cls) -> "RenderMode":
        return cls(DETAILED)

    @classmethod
    def aggregated(cls, cluster_count: int) -> "RenderMode":
        if cluster_count < 1:
            raise ValueError(f"cluster_count must be >= 1, got {cluster_count}")
        return cls(AGGREGATED, cluster_count)

    @property
    def is_detailed(self) -> bool:
        return self.kind == DETAILED

    @property
    def label(self) -> str:
        if self.is_detailed:
            return "Ports"
        return f"{self.cluster_count} clusters"


def select_mode(
    zoom: float,
    detailed_min: float = config.ZOOM_DETAILED_MIN,
    mid_min: float = config.ZOOM_MID_MIN,
    mid_clusters: int = config.MID_CLUSTER_COUNT,
    low_clusters: int = config.LOW_CLUSTER_COUNT,
) -> RenderMode:
    """Pick the render mode for a zoom level. No hysteresis."""
    if zoom >= detailed_min:
        return RenderMode.detailed()
    if zoom >= mid_min:
        return RenderMode.aggregated(mid_clusters)
    return RenderMode.aggregated(low_clusters)


def zoom_tiers(
    detailed_min: float = config.ZOOM_DETAILED_MIN,
    mid_min: float = config.ZOOM_MID_MIN,
    mid_clusters: int = config.MID_CLUSTER_COUNT,
    low_clusters: int = config.LOW_CLUSTER_COUNT,
) -> list[tuple[float | None, RenderMode]]:
    """
    Tiers as (minimum zoom, mode), highest first. The last tier has no lower
    bound (None). Consistent with select_mode for the same arguments.
    """
    return [
        (detailed_min, RenderMode.detailed()),
        (mid_min, RenderMode.aggregated(mid_clusters)),
        (None, RenderMode.aggregated(low_clusters)),
    ]
