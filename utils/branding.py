"""
Ouidah Flow Map — Branding & UI Chrome
Title bar, legend, reset view button, and popup CSS.
"""
import folium

import config
from utils.popup import POPUP_CSS, format_count


def build_popup_styles() -> folium.Element:
    """Inject shared CSS classes for popup/tooltip HTML to reduce file size."""
    return folium.Element(POPUP_CSS)


def build_title_bar(origin_name: str = config.ORIGIN_DEFAULT_NAME) -> folium.Element:
    """Fixed-position title bar at the top of the map."""
    html = f'''
    <div id="title-bar" style="
        position:fixed; top:0; left:50px; right:0; z-index:1000;
        background:rgba(255,255,255,0.95);
        padding:10px 20px;
        box-shadow:0 2px 6px rgba(0,0,0,0.15);
        font-family:Arial,sans-serif;
        max-height:65px; overflow:hidden;
    ">
        <div style="font-size:14px;font-weight:bold;letter-spacing:0.5px;color:#222">
            DÉPORTATIONS DEPUIS {origin_name.upper()} VERS LES AMÉRIQUES
        </div>
        <div style="font-size:12px;color:#555;margin-top:2px">
            Nombre de captifs débarqués par port. Zoomez pour passer des
            regroupements aux ports individuels.
        </div>
        <div style="font-size:11px;color:#999;margin-top:1px">
            Survolez pour un aperçu &middot; Cliquez pour le détail
        </div>
    </div>
    '''
    return folium.Element(html)


def build_legend(
    origin_name: str = config.ORIGIN_DEFAULT_NAME,
    origin_volume: float = config.ORIGIN_VOLUME,
    detailed_min: float = config.ZOOM_DETAILED_MIN,
    mid_min: float = config.ZOOM_MID_MIN,
    mid_clusters: int = config.MID_CLUSTER_COUNT,
    low_clusters: int = config.LOW_CLUSTER_COUNT,
) -> folium.Element:
    """Symbol legend and zoom tiers, positioned bottom-left."""
    swatches = [
        (config.ORIGIN_STYLE["fill_color"], f"{origin_name} ({format_count(origin_volume)} captifs)"),
        (config.PORT_STYLE["fill_color"], "Port de débarquement"),
        (config.CLUSTER_STYLE["fill_color"], "Regroupement de ports (k-means)"),
    ]
    rows = ""
    for color, label in swatches:
        rows += (
            f'<div style="margin:3px 0">'
            f'<span style="color:{color};font-size:16px;'
            f'vertical-align:middle">&#9679;</span> '
            f'<span style="vertical-align:middle">{label}</span></div>\n'
        )

    html = f'''
    <div id="legend" style="
        position:fixed; bottom:30px; left:10px; z-index:1000;
        background:white; padding:12px 16px; border-radius:6px;
        box-shadow:0 1px 4px rgba(0,0,0,0.2);
        font-family:Arial,sans-serif; font-size:12px;
        line-height:1.4; max-width:260px;
    ">
        <div style="font-weight:bold;margin-bottom:6px">
            Nombre de captifs
        </div>
        {rows}
        <div style="color:#888;font-size:11px;margin-top:6px">
            &#9675; surface proportionnelle au nombre de captifs<br>
            &#9472; épaisseur du flux en échelle logarithmique
        </div>
        <div style="color:#888;font-size:11px;margin-top:6px">
            Zoom &ge; {detailed_min} : tous les ports<br>
            Zoom {mid_min} &agrave; {detailed_min} : {mid_clusters} regroupements<br>
            Zoom &lt; {mid_min} : {low_clusters} regroupements
        </div>
    </div>
    '''
    return folium.Element(html)


def build_reset_view_button(bounds: list[list[float]], padding=config.FIT_PADDING) -> folium.Element:
    """Button that fits the map back onto the origin and every port."""
    (south, west), (north, east) = bounds
    pad_x, pad_y = padding
    html = f'''
    <button id="reset-view-btn" onclick="
        var maps = Object.values(window).filter(function(v) {{
            return v instanceof L.Map;
        }});
        if (maps.length > 0) maps[0].fitBounds([[{south}, {west}], [{north}, {east}]], {{padding: [{pad_x}, {pad_y}]}});
    " style="
        position:fixed; top:75px; right:10px; z-index:1000;
        background:white; border:1px solid #ccc; border-radius:4px;
        padding:6px 12px; cursor:pointer;
        font-family:Arial,sans-serif; font-size:12px; color:#333;
    " onmouseover="this.style.background='#f0f0f0'"
       onmouseout="this.style.background='white'"
    >&#8635; Recentrer</button>
    '''
    return folium.Element(html)
