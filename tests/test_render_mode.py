"""Tests for zoom-driven render mode selection."""
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import config
from utils.render_mode import RenderMode, select_mode, zoom_tiers


def test_reference_zoom_levels():
    assert select_mode(2) == RenderMode.aggregated(5)
    assert select_mode(4) == RenderMode.aggregated(20)
    assert select_mode(6) == RenderMode.detailed()


@pytest.mark.parametrize("zoom,expected", [
    (0, RenderMode.aggregated(config.LOW_CLUSTER_COUNT)),
    (config.ZOOM_MID_MIN - 0.5, RenderMode.aggregated(config.LOW_CLUSTER_COUNT)),
    (config.ZOOM_MID_MIN, RenderMode.aggregated(config.MID_CLUSTER_COUNT)),
    (config.ZOOM_DETAILED_MIN - 0.1, RenderMode.aggregated(config.MID_CLUSTER_COUNT)),
    (config.ZOOM_DETAILED_MIN, RenderMode.detailed()),
    (config.MAX_ZOOM, RenderMode.detailed()),
])
def test_threshold_boundaries(zoom, expected):
    """Lower bounds are inclusive."""
    assert select_mode(zoom) == expected


def test_custom_thresholds():
    """The 6/4 variant with the same cluster counts."""
    assert select_mode(5, detailed_min=6, mid_min=4) == RenderMode.aggregated(20)
    assert select_mode(3, detailed_min=6, mid_min=4) == RenderMode.aggregated(5)
    assert select_mode(6, detailed_min=6, mid_min=4) == RenderMode.detailed()


def test_selection_is_stateless():
    """Oscillating around a threshold gives the same answer every time."""
    zooms = [4, 5, 4, 5, 4]
    modes = [select_mode(z) for z in zooms]
    assert modes == [RenderMode.aggregated(20), RenderMode.detailed()] * 2 + [RenderMode.aggregated(20)]


def test_zoom_tiers_agree_with_select_mode():
    tiers = zoom_tiers()
    assert [mode for _, mode in tiers] == [
        RenderMode.detailed(),
        RenderMode.aggregated(config.MID_CLUSTER_COUNT),
        RenderMode.aggregated(config.LOW_CLUSTER_COUNT),
    ]
    for min_zoom, mode in tiers:
        if min_zoom is not None:
            assert select_mode(min_zoom) == mode
    assert tiers[-1][0] is None


def test_aggregated_requires_positive_count():
    with pytest.raises(ValueError):
        RenderMode.aggregated(0)


def test_modes_are_hashable_and_labelled():
    renderers = {RenderMode.detailed(): "a", RenderMode.aggregated(5): "b"}
    assert renderers[RenderMode.aggregated(5)] == "b"
    assert RenderMode.detailed().label == "Ports"
    assert RenderMode.aggregated(20).label == "20 clusters"
