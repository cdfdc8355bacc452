"""
Ouidah Flow Map — Build Script
Load the two GeoJSON documents, render ports/clusters and flows per zoom tier,
and save a standalone Leaflet page.
"""
import logging
import os
import sys

# Ensure project root is on path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import folium

from layers.flows import FlowRenderer
from layers.origin import build_origin_layer
from layers.zoom_switch import ZoomModeSwitch
from utils.branding import (
    build_legend,
    build_popup_styles,
    build_reset_view_button,
    build_title_bar,
)
from utils.data_loader import StageResult, run_pipeline
from utils.render_mode import zoom_tiers
from utils.session import MapSession
import config

logger = logging.getLogger(__name__)


def build_base_map(location=None, zoom: int = config.DEFAULT_ZOOM) -> folium.Map:
    return folium.Map(
        location=location or config.DEFAULT_CENTER,
        zoom_start=zoom,
        tiles=config.TILE_PROVIDER,
        max_zoom=config.MAX_ZOOM,
        control_scale=True,
        prefer_canvas=True,
    )


def add_flow_layers(m: folium.Map, session: MapSession) -> dict:
    """
    Render one layer pair per zoom tier and attach the zoom switch.

    Returns {mode: renderer}.
    """
    tiers = zoom_tiers()
    renderers = {}
    for _, mode in tiers:
        renderer = FlowRenderer(label=mode.label, show=False)
        renderer.render(mode, session)
        renderer.add_to(m)
        renderers[mode] = renderer

    m.fit_bounds(session.bounds, padding=config.FIT_PADDING)
    ZoomModeSwitch.from_modes(tiers, renderers).add_to(m)
    return renderers


def build_flow_map(origin_result: StageResult, final_result: StageResult) -> folium.Map:
    """
    Assemble the page. Failed loads still produce the base map; the origin
    marker stays when only the destinations stage failed.
    """
    # Start on the origin; fit_bounds takes over once ports are drawn
    if origin_result.ok:
        m = build_base_map(origin_result.value.latlng, config.ORIGIN_ZOOM)
    else:
        m = build_base_map()
    m.get_root().html.add_child(build_popup_styles())

    if final_result.ok:
        session = final_result.value
        # Layer z-order: flows (bottom) -> ports/clusters -> origin (top)
        add_flow_layers(m, session)
        build_origin_layer(session.origin, session.size_scale).add_to(m)
        m.get_root().html.add_child(build_title_bar(session.origin.name))
        m.get_root().html.add_child(build_legend(session.origin.name, session.origin.volume))
        m.get_root().html.add_child(build_reset_view_button(session.bounds))
    elif origin_result.ok:
        origin = origin_result.value
        build_origin_layer(origin).add_to(m)
        m.get_root().html.add_child(build_title_bar(origin.name))
    else:
        m.get_root().html.add_child(build_title_bar())

    return m


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    logger.info("=== Ouidah Flow Map — Build ===")
    logger.info(f"Data source: {config.DATA_SOURCE}")

    origin_result, final_result = run_pipeline(config.DATA_SOURCE)

    if final_result.ok:
        session = final_result.value
        logger.info(f"Origin: {session.origin.name} ({session.origin.volume:,.0f} captives)")
        logger.info(f"Destination ports: {len(session.records)}")
        logger.info(
            f"Scale range: {session.scale_state.min_positive:,.0f} – "
            f"{session.scale_state.max_value:,.0f}"
        )
    else:
        logger.error(
            f"Data load stopped at stage '{final_result.stage}'; "
            f"writing base map without data layers"
        )

    m = build_flow_map(origin_result, final_result)

    # Save
    os.makedirs(config.OUTPUT_DIR, exist_ok=True)
    output_path = os.path.join(config.OUTPUT_DIR, config.OUTPUT_FILE)
    m.save(output_path)

    file_size_kb = os.path.getsize(output_path) / 1024
    logger.info(f"Map saved to {output_path} ({file_size_kb:.0f} KB)")
    return 0 if final_result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
