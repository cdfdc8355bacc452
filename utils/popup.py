"""
Ouidah Flow Map — Tooltip and Popup HTML Generation
Port, cluster and origin labels for Leaflet tooltips and popups.
"""
import html
import math


# CSS classes injected once into the page (via branding.py build_popup_styles)
# to keep per-marker HTML small.
POPUP_CSS = """
<style>
.of-p{font-family:Arial,sans-serif;max-width:260px;font-size:13px;line-height:1.5;margin:0;padding:0}
.of-h{font-weight:bold;margin-bottom:4px}
.of-m{color:#888;font-size:11px}
.of-l{margin:4px 0 0 0;padding-left:16px;max-height:160px;overflow-y:auto;font-size:12px}
.of-tt{font-family:Arial,sans-serif;font-size:12px;padding:4px 8px;max-width:220px;line-height:1.4}
</style>
"""

# fr-FR digit grouping uses a narrow no-break space
THOUSANDS_SEP = "\u202f"


def format_count(value) -> str:
    """Format a count the way fr-FR locales do: 1 300 000, 12,5."""
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return "N/A"
    try:
        num = float(value)
    except (ValueError, TypeError):
        return "N/A"
    if num.is_integer():
        text = f"{int(num):,}"
    else:
        text = f"{num:,.3f}".rstrip("0").rstrip(".")
    return text.replace(",", THOUSANDS_SEP).replace(".", ",")


def build_port_tooltip_html(name: str, volume: float) -> str:
    return (
        f'<div class="of-tt"><b>{html.escape(name)}</b><br>'
        f'{format_count(volume)} captifs</div>'
    )


def build_port_popup_html(name: str, volume: float) -> str:
    return (
        f'<div class="of-p">'
        f'<div class="of-h">Port de {html.escape(name)}</div>'
        f'Nombre de captifs : {format_count(volume)}</div>'
    )


def build_flow_popup_html(origin_name: str, name: str, volume: float) -> str:
    return (
        f'<div class="of-p">'
        f'<div class="of-m">{html.escape(origin_name)} &rarr; {html.escape(name)}</div>'
        f'Nombre de captifs : {format_count(volume)}</div>'
    )


def build_cluster_tooltip_html(count: int, volume: float) -> str:
    return (
        f'<div class="of-tt"><b>Cluster de {count} ports</b><br>'
        f'{format_count(volume)} captifs</div>'
    )


def build_cluster_popup_html(count: int, volume: float, members: list[str]) -> str:
    """Cluster card with the member port names, largest first."""
    items = "".join(f"<li>{html.escape(str(m))}</li>" for m in members)
    return (
        f'<div class="of-p">'
        f'<div class="of-h">Cluster de {count} ports</div>'
        f'Nombre total de captifs : {format_count(volume)}'
        f'<ul class="of-l">{items}</ul></div>'
    )


def build_cluster_flow_popup_html(origin_name: str, count: int, volume: float) -> str:
    return (
        f'<div class="of-p">'
        f'<div class="of-m">{html.escape(origin_name)} &rarr; {count} ports</div>'
        f'Nombre total de captifs : {format_count(volume)}</div>'
    )
