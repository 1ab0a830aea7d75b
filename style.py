"""Visual style constants: edit here to tweak the gallery's appearance."""

from PySide6.QtGui import QColor

# ── Main viewer ───────────────────────────────────────────────────────────────
VIEWER_BG = "#1e1e1e"
VIEWER_TEXT = "#bbbbbb"
VIEWER_MIN_HEIGHT = 360
TITLE_OVERLAY_BG = QColor(0, 0, 0, 140)    # semi-transparent strip under the title
TITLE_OVERLAY_TEXT = "white"
EMPTY_STATE_TEXT = "No photos yet.\nClick “+ Add photo” to start your gallery."
LOADING_TEXT = "Loading…"
UNAVAILABLE_TEXT = "Image unavailable"

# ── Filmstrip ─────────────────────────────────────────────────────────────────
FILMSTRIP_BG = "#2b2b2b"
FILMSTRIP_HEIGHT = 150
THUMB_WIDTH = 80                  # px; thumbnails are fetched at 200x300
THUMB_HEIGHT = 110
THUMB_CAPTION_HEIGHT = 16
THUMB_BORDER = "#444"
THUMB_ACTIVE_BORDER = "#4682b4"
THUMB_ACTIVE_BORDER_WIDTH = 3
THUMB_PLACEHOLDER_BG = "#3a3a3a"

# ── Toolbar ───────────────────────────────────────────────────────────────────
BUTTON_HEIGHT = 28
