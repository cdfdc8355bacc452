"""Tests for building the origin and the destination port table from GeoJSON features."""
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import config
from utils.data_prep import RECORD_COLUMNS, build_origin, build_records
from conftest import point_feature


def test_origin_volume_is_overridden(origin_features):
    origin = build_origin(origin_features)
    assert origin.volume == config.ORIGIN_VOLUME == 1_300_000
    assert origin.name == "Ouidah"
    assert origin.latlng == [pytest.approx(6.3622), pytest.approx(2.0857)]


def test_origin_name_defaults():
    origin = build_origin([point_feature(2.0, 6.0)])
    assert origin.name == config.ORIGIN_DEFAULT_NAME


def test_origin_uses_first_feature_only():
    origin = build_origin([
        point_feature(2.0, 6.0, name="Gléhué"),
        point_feature(10.0, 10.0, name="Ailleurs"),
    ])
    assert origin.name == "Gléhué"
    assert origin.lon == pytest.approx(2.0)


def test_origin_without_point_raises():
    with pytest.raises(ValueError):
        build_origin([{"type": "Feature", "geometry": None, "properties": {}}])


def test_records_drop_invalid_features(destination_features):
    """Only Point features with a numeric volume survive."""
    records = build_records(destination_features)
    assert list(records.columns) == RECORD_COLUMNS
    assert len(records) == 4, f"Unexpected records: {records['name'].tolist()}"
    assert set(records["name"]) == {"Bahia", "Port-au-Prince", "Kingston", config.UNKNOWN_PORT_NAME}
    for excluded in ["Saint-Pierre", "Sans volume", "Nulle part", "Ligne"]:
        assert excluded not in set(records["name"])


def test_records_coerce_numeric_strings(destination_features):
    records = build_records(destination_features)
    kingston = records.loc[records["name"] == "Kingston"].iloc[0]
    assert kingston["volume"] == 25_000


def test_records_positions(destination_features):
    records = build_records(destination_features)
    bahia = records.loc[records["name"] == "Bahia"].iloc[0]
    assert bahia["lon"] == pytest.approx(-38.51)
    assert bahia["lat"] == pytest.approx(-12.97)


def test_records_keep_zero_volume():
    """Zero is a valid count; it renders at the minimum size."""
    records = build_records([point_feature(-60.0, 15.0, name="Zéro", volume=0)])
    assert len(records) == 1
    assert records.iloc[0]["volume"] == 0


def test_records_drop_negative_volume():
    records = build_records([point_feature(-60.0, 15.0, name="Négatif", volume=-10)])
    assert records.empty


def test_records_without_properties():
    feature = {"type": "Feature", "geometry": {"type": "Point", "coordinates": [1, 2]}}
    assert build_records([feature]).empty


def test_records_empty_input():
    records = build_records([])
    assert records.empty
    assert list(records.columns) == RECORD_COLUMNS


def test_records_accept_3d_points():
    feature = point_feature(-38.5, -13.0, name="Bahia", volume=10)
    feature["geometry"]["coordinates"].append(0.0)
    records = build_records([feature])
    assert records.iloc[0]["lat"] == pytest.approx(-13.0)


def test_records_skip_malformed_features():
    """Null entries and unreadable geometries are dropped like any other invalid port."""
    features = [
        None,
        "not a feature",
        {"type": "Feature", "geometry": {"type": "Point"}, "properties": {config.VOLUME_FIELD: 10}},
        {"type": "Feature", "geometry": {"type": "Point", "coordinates": None}, "properties": {config.VOLUME_FIELD: 20}},
        {"type": "Feature", "geometry": "POINT (1 2)", "properties": {config.VOLUME_FIELD: 30}},
        {"type": "Feature", "geometry": {"type": "Point", "coordinates": [1, 2]}, "properties": "oops"},
        point_feature(-38.51, -12.97, name="Bahia", volume=500000),
    ]
    records = build_records(features)
    assert records["name"].tolist() == ["Bahia"]
    assert records.iloc[0]["volume"] == 500000


def test_records_only_malformed_features():
    records = build_records([None, {"type": "Feature", "geometry": {"type": "Point"}}])
    assert records.empty
    assert list(records.columns) == RECORD_COLUMNS


def test_origin_null_feature_raises_value_error():
    with pytest.raises(ValueError):
        build_origin([None])
    with pytest.raises(ValueError):
        build_origin([{"type": "Feature", "geometry": {"type": "Point"}, "properties": {}}])


def test_numeric_names_are_kept():
    records = build_records([
        point_feature(-60.0, 15.0, name=123, volume=10),
        point_feature(-61.0, 16.0, name="", volume=20),
    ])
    assert records["name"].tolist() == ["123", config.UNKNOWN_PORT_NAME]
    assert build_origin([point_feature(2.0, 6.0, name=7)]).name == "7"


def test_numeric_name_column_with_gaps():
    """A float-typed name column (numbers plus a missing value) still yields integer labels."""
    records = build_records([
        point_feature(-60.0, 15.0, name=123, volume=10),
        point_feature(-61.0, 16.0, volume=20),
    ])
    assert records["name"].tolist() == ["123", config.UNKNOWN_PORT_NAME]
