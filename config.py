"""
Ouidah Flow Map — Configuration
All configuration: data sources, property keys, scales, zoom tiers, colors, map defaults, file paths.
"""
import os

# --- Data Sources ---
# Directory or http(s) base URL holding the two GeoJSON documents
DATA_SOURCE = os.environ.get("OUIDAH_DATA_SOURCE", "data")
ORIGIN_FILE = "ouidah.geojson"
DESTINATIONS_FILE = "disembarkations_america.geojson"
REQUEST_TIMEOUT = 60  # seconds

# Property keys used by the source GeoJSON files. Do not rename.
NAME_FIELD = "Principa_1"
VOLUME_FIELD = "total_disembarked"

# --- Origin ---
ORIGIN_DEFAULT_NAME = "Ouidah"
ORIGIN_VOLUME = 1_300_000  # overrides whatever the source file says
UNKNOWN_PORT_NAME = "Port inconnu"

# --- Symbol Sizing (square-root scale) ---
MARKER_MIN_RADIUS = 4
MARKER_MAX_RADIUS = 25
ORIGIN_PROVISIONAL_RADIUS = 10  # before scales are known

# --- Flow Line Widths (log scale) ---
LINE_MIN_WIDTH = 1
LINE_MAX_WIDTH = 10

# --- Zoom Tiers ---
# zoom >= 5: every port; 3 <= zoom < 5: 20 clusters; zoom < 3: 5 clusters
ZOOM_DETAILED_MIN = 5
ZOOM_MID_MIN = 3
MID_CLUSTER_COUNT = 20
LOW_CLUSTER_COUNT = 5
KMEANS_RANDOM_STATE = 0

# --- Colors ---
ORIGIN_STYLE = {"fill_color": "#800026", "color": "#400013"}
PORT_STYLE = {"fill_color": "#1f78b4", "color": "#084d74", "line_color": "#0000ff", "line_opacity": 0.7}
CLUSTER_STYLE = {"fill_color": "#41ab5d", "color": "#238443", "line_color": "#00441b", "line_opacity": 0.8}

# --- Map Defaults ---
DEFAULT_CENTER = [15.0, -40.0]  # mid-Atlantic
DEFAULT_ZOOM = 3
ORIGIN_ZOOM = 3
MAX_ZOOM = 10
TILE_PROVIDER = "OpenStreetMap"
FIT_PADDING = (20, 20)

# --- File Paths ---
OUTPUT_DIR = os.environ.get("OUIDAH_OUTPUT_DIR", "output")
OUTPUT_FILE = "ouidah_flows.html"
