"""
Ouidah Flow Map — Port and Flow Layers
Proportional circles for destination ports (or clusters of ports) and flow
lines from Ouidah weighted by the number of captives.
"""
import logging

import folium

import config
from utils.clustering import aggregate_clusters
from utils.popup import (
    build_cluster_flow_popup_html,
    build_cluster_popup_html,
    build_cluster_tooltip_html,
    build_flow_popup_html,
    build_port_popup_html,
    build_port_tooltip_html,
)
from utils.render_mode import RenderMode
from utils.session import MapSession

logger = logging.getLogger(__name__)


def clear_layer(fg: folium.FeatureGroup) -> None:
    """Remove every marker/line previously drawn into a FeatureGroup."""
    fg._children.clear()


class FlowRenderer:
    """
    Owns one pair of layers (port symbols, flow lines) and redraws both from
    scratch on every render() call.
    """

    def __init__(self, label: str = "Ports", show: bool = True):
        self.ports_layer = folium.FeatureGroup(name=f"{label}: ports", show=show)
        self.flows_layer = folium.FeatureGroup(name=f"{label}: flux", show=show)
        self.mode: RenderMode | None = None

    @property
    def layers(self) -> list[folium.FeatureGroup]:
        return [self.flows_layer, self.ports_layer]

    @property
    def symbol_count(self) -> int:
        return len(self.ports_layer._children)

    @property
    def line_count(self) -> int:
        return len(self.flows_layer._children)

    def add_to(self, m: folium.Map) -> "FlowRenderer":
        # Lines first so the circles stay clickable on top
        for fg in self.layers:
            fg.add_to(m)
        return self

    def render(self, mode: RenderMode, session: MapSession) -> None:
        clear_layer(self.ports_layer)
        clear_layer(self.flows_layer)
        self.mode = mode

        if mode.is_detailed:
            self._draw_detailed(session)
        else:
            self._draw_clustered(session, mode.cluster_count)

        logger.info(
            f"Rendered {mode.label}: {self.symbol_count} symbols, {self.line_count} flow lines"
        )

    def _draw_symbol(self, latlng, radius, style, tooltip_html, popup_html) -> None:
        folium.CircleMarker(
            location=latlng,
            radius=radius,
            color=style["color"],
            weight=1,
            fill=True,
            fill_color=style["fill_color"],
            fill_opacity=0.8,
            tooltip=folium.Tooltip(tooltip_html),
            popup=folium.Popup(popup_html, max_width=280),
        ).add_to(self.ports_layer)

    def _draw_flow(self, origin_latlng, latlng, weight, style, tooltip_html, popup_html) -> None:
        folium.PolyLine(
            locations=[origin_latlng, latlng],
            weight=weight,
            color=style["line_color"],
            opacity=style["line_opacity"],
            tooltip=folium.Tooltip(tooltip_html),
            popup=folium.Popup(popup_html, max_width=280),
        ).add_to(self.flows_layer)

    def _draw_detailed(self, session: MapSession) -> None:
        """One circle and one flow line per port."""
        style = config.PORT_STYLE
        origin = session.origin

        for row in session.records.itertuples(index=False):
            latlng = [row.lat, row.lon]
            tooltip_html = build_port_tooltip_html(row.name, row.volume)

            self._draw_symbol(
                latlng,
                session.size_scale(row.volume),
                style,
                tooltip_html,
                build_port_popup_html(row.name, row.volume),
            )
            self._draw_flow(
                origin.latlng,
                latlng,
                session.line_width(row.volume),
                style,
                tooltip_html,
                build_flow_popup_html(origin.name, row.name, row.volume),
            )

    def _draw_clustered(self, session: MapSession, cluster_count: int) -> None:
        """One circle at each cluster centroid and one aggregated flow line."""
        style = config.CLUSTER_STYLE
        origin = session.origin
        clusters = aggregate_clusters(session.records, cluster_count)

        for row in clusters.itertuples(index=False):
            latlng = [row.lat, row.lon]
            tooltip_html = build_cluster_tooltip_html(row.port_count, row.volume)

            self._draw_symbol(
                latlng,
                session.size_scale(row.volume),
                style,
                tooltip_html,
                build_cluster_popup_html(row.port_count, row.volume, row.members),
            )
            self._draw_flow(
                origin.latlng,
                latlng,
                session.line_width(row.volume),
                style,
                tooltip_html,
                build_cluster_flow_popup_html(origin.name, row.port_count, row.volume),
            )
