"""
Ouidah Flow Map — Origin Layer
The departure port, drawn on the same square-root scale as the destinations.
"""
from typing import Callable

import folium

import config
from utils.data_prep import Origin
from utils.popup import build_port_popup_html, build_port_tooltip_html


def build_origin_layer(
    origin: Origin,
    size_scale: Callable[[float], float] | None = None,
) -> folium.FeatureGroup:
    """
    Circle marker for the origin port. Without a size scale (destinations not
    loaded yet) the marker gets a provisional radius.
    """
    if size_scale is None:
        radius = config.ORIGIN_PROVISIONAL_RADIUS
    else:
        radius = size_scale(origin.volume)

    fg = folium.FeatureGroup(name=f"Port de {origin.name}", show=True)
    style = config.ORIGIN_STYLE

    folium.CircleMarker(
        location=origin.latlng,
        radius=radius,
        color=style["color"],
        weight=1,
        fill=True,
        fill_color=style["fill_color"],
        fill_opacity=0.8,
        tooltip=folium.Tooltip(build_port_tooltip_html(origin.name, origin.volume)),
        popup=folium.Popup(build_port_popup_html(origin.name, origin.volume), max_width=280),
    ).add_to(fg)

    return fg
