"""
Ouidah Flow Map — Zoom Mode Switch
Leaflet script that shows the layer pair of the current zoom tier and hides
the others, re-evaluated on every zoomend.
"""
from branca.element import MacroElement, Template

from layers.flows import FlowRenderer
from utils.render_mode import RenderMode


class ZoomModeSwitch(MacroElement):
    """
    tiers: [(min_zoom, renderer), ...] ordered highest zoom first, as returned
    by utils.render_mode.zoom_tiers(). The last tier's min_zoom is None.

    Must be added to the map after the renderers' layers and after fit_bounds
    so the initial zoom is the fitted one.
    """

    _template = Template("""
        {% macro script(this, kwargs) %}
        (function() {
            var map = {{ this._parent.get_name() }};
            var tiers = [
            {%- for min_zoom, renderer in this.tiers %}
                {
                    minZoom: {{ min_zoom if min_zoom is not none else "-Infinity" }},
                    layers: [{% for fg in renderer.layers %}{{ fg.get_name() }}{{ ", " if not loop.last }}{% endfor %}]
                }{{ "," if not loop.last }}
            {%- endfor %}
            ];

            function tierForZoom(z) {
                for (var i = 0; i < tiers.length; i++) {
                    if (z >= tiers[i].minZoom) { return tiers[i]; }
                }
                return tiers[tiers.length - 1];
            }

            function updateMapForZoom() {
                var active = tierForZoom(map.getZoom());
                tiers.forEach(function(tier) {
                    tier.layers.forEach(function(layer) {
                        if (tier === active) {
                            if (!map.hasLayer(layer)) { layer.addTo(map); }
                        } else if (map.hasLayer(layer)) {
                            map.removeLayer(layer);
                        }
                    });
                });
            }

            updateMapForZoom();
            map.on('zoomend', updateMapForZoom);
        })();
        {% endmacro %}
    """)

    def __init__(self, tiers: list[tuple[float | None, FlowRenderer]]):
        super().__init__()
        self._name = "ZoomModeSwitch"
        self.tiers = tiers

    @classmethod
    def from_modes(
        cls,
        tiers: list[tuple[float | None, RenderMode]],
        renderers: dict[RenderMode, FlowRenderer],
    ) -> "ZoomModeSwitch":
        return cls([(min_zoom, renderers[mode]) for min_zoom, mode in tiers])
