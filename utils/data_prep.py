"""
Ouidah Flow Map — Data Preparation
Turn raw GeoJSON features into the origin record and the destination port table.
"""
import logging
from dataclasses import dataclass

import geopandas as gpd
import pandas as pd
from shapely.errors import ShapelyError
from shapely.geometry import shape

import config

logger = logging.getLogger(__name__)

RECORD_COLUMNS = ["name", "lon", "lat", "volume"]


@dataclass(frozen=True)
class Origin:
    name: str
    lon: float
    lat: float
    volume: float

    @property
    def latlng(self) -> list[float]:
        return [self.lat, self.lon]


def _parse_geometry(geometry):
    """Return the geometry mapping if shapely can build it, else None."""
    if not geometry:
        return None
    try:
        shape(geometry)
    except (AttributeError, KeyError, TypeError, ValueError, ShapelyError):
        return None
    return geometry


def _normalize_features(features: list) -> list[dict]:
    """Make every feature safe for GeoDataFrame.from_features.

    Non-object entries are dropped; unreadable geometries become None and
    non-object properties become {}.
    """
    normalized = []
    for f in features:
        if not isinstance(f, dict):
            continue
        props = f.get("properties")
        normalized.append({
            "type": "Feature",
            "geometry": _parse_geometry(f.get("geometry")),
            "properties": props if isinstance(props, dict) else {},
        })
    skipped = len(features) - len(normalized)
    if skipped:
        logger.warning(f"Skipped {skipped} feature entries that are not GeoJSON objects")
    return normalized


def features_to_frame(features: list) -> gpd.GeoDataFrame:
    """Load features into a WGS84 GeoDataFrame, guaranteeing the name/volume columns exist."""
    normalized = _normalize_features(features)
    if not normalized:
        return gpd.GeoDataFrame(
            {col: pd.Series(dtype=object) for col in (config.NAME_FIELD, config.VOLUME_FIELD)},
            geometry=gpd.GeoSeries([], crs="EPSG:4326"),
        )
    gdf = gpd.GeoDataFrame.from_features(normalized, crs="EPSG:4326")
    for col in (config.NAME_FIELD, config.VOLUME_FIELD):
        if col not in gdf.columns:
            gdf[col] = None
    return gdf


def _point_mask(gdf: gpd.GeoDataFrame) -> pd.Series:
    geom_types = gdf.geometry.geom_type
    return geom_types.eq("Point") & ~gdf.geometry.is_empty


def display_name(value, default: str) -> str:
    """Name property as text; `default` only when it is missing, NaN or empty."""
    if isinstance(value, str):
        return value or default
    if value is None or (pd.api.types.is_scalar(value) and pd.isna(value)):
        return default
    if isinstance(value, float) and value.is_integer():
        # Numeric name columns with gaps are read back as floats
        return str(int(value))
    return str(value)


def build_origin(features: list) -> Origin:
    """
    The first feature is the origin port. Its name defaults to "Ouidah" and its
    volume is always replaced by config.ORIGIN_VOLUME.
    """
    gdf = features_to_frame(features[:1])
    if gdf.empty or not _point_mask(gdf).iloc[0]:
        raise ValueError("Origin feature has no Point geometry")

    row = gdf.iloc[0]
    return Origin(
        name=display_name(row[config.NAME_FIELD], config.ORIGIN_DEFAULT_NAME),
        lon=float(row.geometry.x),
        lat=float(row.geometry.y),
        volume=float(config.ORIGIN_VOLUME),
    )


def build_records(features: list) -> pd.DataFrame:
    """
    Build the destination port table (name, lon, lat, volume).

    Features without a readable Point geometry or with a non-numeric volume are dropped.
    """
    if not features:
        return pd.DataFrame(columns=RECORD_COLUMNS)

    gdf = features_to_frame(features)
    gdf = gdf[_point_mask(gdf)]

    df = pd.DataFrame({
        "name": gdf[config.NAME_FIELD],
        "lon": gdf.geometry.x,
        "lat": gdf.geometry.y,
        "volume": pd.to_numeric(gdf[config.VOLUME_FIELD], errors="coerce"),
    })
    df["name"] = [display_name(name, config.UNKNOWN_PORT_NAME) for name in df["name"]]
    df = df.dropna(subset=["volume"])
    df = df[df["volume"] >= 0]

    return df[RECORD_COLUMNS].reset_index(drop=True)
