"""Shared fixtures: small GeoJSON documents and a ready map session."""
import json
import os
import sys

import pytest

# Ensure project root is on path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import config
from utils.data_prep import build_origin, build_records
from utils.session import build_session


def point_feature(lon, lat, name=None, volume=None, extra=None):
    props = {}
    if name is not None:
        props[config.NAME_FIELD] = name
    if volume is not None:
        props[config.VOLUME_FIELD] = volume
    if extra:
        props.update(extra)
    return {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": [lon, lat]},
        "properties": props,
    }


def collection(features):
    return {"type": "FeatureCollection", "features": features}


@pytest.fixture
def origin_features():
    # Source volume is deliberately wrong; it must be overridden
    return [point_feature(2.0857, 6.3622, name="Ouidah", volume=42)]


@pytest.fixture
def destination_features():
    return [
        point_feature(-38.51, -12.97, name="Bahia", volume=500000),
        point_feature(-72.34, 18.54, name="Port-au-Prince", volume=10000),
        point_feature(-76.79, 17.97, name="Kingston", volume="25000"),
        point_feature(-61.0, 14.6, name="Saint-Pierre", volume=None),
        point_feature(-60.0, 14.0, name="Sans volume", volume="n/a"),
        {"type": "Feature", "geometry": None, "properties": {config.NAME_FIELD: "Nulle part", config.VOLUME_FIELD: 900}},
        {
            "type": "Feature",
            "geometry": {"type": "LineString", "coordinates": [[0, 0], [1, 1]]},
            "properties": {config.NAME_FIELD: "Ligne", config.VOLUME_FIELD: 300},
        },
        point_feature(-34.88, -8.05, volume=1200),
    ]


@pytest.fixture
def data_dir(tmp_path, origin_features, destination_features):
    """A data directory holding both GeoJSON documents."""
    with open(tmp_path / config.ORIGIN_FILE, "w", encoding="utf-8") as f:
        json.dump(collection(origin_features), f)
    with open(tmp_path / config.DESTINATIONS_FILE, "w", encoding="utf-8") as f:
        json.dump(collection(destination_features), f)
    return tmp_path


@pytest.fixture
def session(origin_features, destination_features):
    origin = build_origin(origin_features)
    records = build_records(destination_features)
    return build_session(origin, records)
