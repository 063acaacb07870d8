"""HashQR: terminal QR codes saved under content-addressed file names."""

__version__ = "1.0.0"

# Shared constants
OUTPUT_DIR = "img"
SAVE_FLAG = "--png"
FORCE_SAVE_ENV = "FORCE_SAVE_PNG"  # Presence alone enables saving, value is ignored
QUIET_ZONE = 4  # Modules of blank border required around a QR symbol
MIN_SVG_SIZE = 200
DARK_COLOR = "#000000"
LIGHT_COLOR = "#ffffff"
