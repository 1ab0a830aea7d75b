"""Main application window: the photo viewer, its controls and the filmstrip."""

import logging

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QPushButton, QHBoxLayout,
    QInputDialog, QMessageBox, QSizePolicy
)
from PySide6.QtCore import Qt, QRect
from PySide6.QtGui import QKeySequence, QShortcut, QPainter, QColor, QPixmap

import storage
import style
from data import CursorList, PhotoNotFound
from filmstrip_widget import FilmstripWidget
from image_loader import ImageLoader
from storage import Settings

logger = logging.getLogger(__name__)

_TITLE_STRIP_HEIGHT = 36


class PhotoViewer(QWidget):
    """Large view of the current photo.
    Shows exactly one of: the empty-gallery message, a loading indicator,
    the photo with its name on a translucent strip, or a placeholder when
    the image could not be fetched.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self._pixmap: QPixmap | None = None
        self._title = ""
        self._message = style.EMPTY_STATE_TEXT
        self.setMinimumHeight(style.VIEWER_MIN_HEIGHT)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)

    def title(self) -> str:
        return self._title

    def message(self) -> str:
        return self._message

    def show_empty(self) -> None:
        self._set_state(None, "", style.EMPTY_STATE_TEXT)

    def show_loading(self, title: str) -> None:
        self._set_state(None, title, style.LOADING_TEXT)

    def show_unavailable(self, title: str) -> None:
        self._set_state(None, title, f"{style.UNAVAILABLE_TEXT}\n{title}")

    def show_photo(self, pixmap: QPixmap, title: str) -> None:
        self._set_state(pixmap, title, "")

    def _set_state(self, pixmap: QPixmap | None, title: str, message: str) -> None:
        self._pixmap = pixmap
        self._title = title
        self._message = message
        self.update()

    # ── Painting ──────────────────────────────────────────────────────────────

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.fillRect(self.rect(), QColor(style.VIEWER_BG))

        if self._pixmap is None:
            painter.setPen(QColor(style.VIEWER_TEXT))
            painter.drawText(self.rect(), Qt.AlignmentFlag.AlignCenter, self._message)
            painter.end()
            return

        scaled = self._pixmap.scaled(
            self.size(),
            Qt.AspectRatioMode.KeepAspectRatio,
            Qt.TransformationMode.SmoothTransformation,
        )
        x = (self.width() - scaled.width()) // 2
        y = (self.height() - scaled.height()) // 2
        painter.drawPixmap(x, y, scaled)

        strip = QRect(0, self.height() - _TITLE_STRIP_HEIGHT, self.width(), _TITLE_STRIP_HEIGHT)
        painter.fillRect(strip, style.TITLE_OVERLAY_BG)
        painter.setPen(QColor(style.TITLE_OVERLAY_TEXT))
        painter.drawText(
            strip.adjusted(12, 0, -12, 0),
            Qt.AlignmentFlag.AlignVCenter | Qt.AlignmentFlag.AlignLeft,
            self._title,
        )
        painter.end()


class MainWindow(QMainWindow):
    def __init__(self, settings: Settings, names: list[str] | None = None):
        super().__init__()
        self.setWindowTitle("Photo Gallery")
        self._settings = settings
        self.resize(settings.window_width, settings.window_height)

        self._gallery = CursorList(base_url=settings.image_base_url)
        self._loader = ImageLoader(self)
        self._loader.loaded.connect(self._on_image_loaded)
        self._loader.failed.connect(self._on_image_failed)

        # Shortcuts
        QShortcut(QKeySequence(Qt.Key.Key_Right), self, self._on_next)
        QShortcut(QKeySequence(Qt.Key.Key_Left), self, self._on_previous)
        QShortcut(QKeySequence(Qt.Key.Key_Delete), self, self._on_delete_current)
        QShortcut(QKeySequence(Qt.Key.Key_Backspace), self, self._on_delete_current)
        QShortcut(QKeySequence.StandardKey.Save, self, self._save)

        self._build_ui()
        for name in names or []:
            self._gallery.insert(name)
        self._render()

    # ------------------------------------------------------------------ #
    # UI construction                                                      #
    # ------------------------------------------------------------------ #

    def _build_ui(self):
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(8, 8, 8, 8)
        root.setSpacing(6)

        # Toolbar
        toolbar = QHBoxLayout()
        btn_add = QPushButton("+ Add photo")
        btn_add.clicked.connect(self._on_add_photo)
        self._btn_prev = QPushButton("< Prev")
        self._btn_prev.clicked.connect(self._on_previous)
        self._btn_next = QPushButton("Next >")
        self._btn_next.clicked.connect(self._on_next)
        self._btn_delete = QPushButton("Delete")
        self._btn_delete.clicked.connect(self._on_delete_current)
        for btn in (btn_add, self._btn_prev, self._btn_next, self._btn_delete):
            btn.setFixedHeight(style.BUTTON_HEIGHT)
            # Keep arrow keys and Backspace free for the window shortcuts
            btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        toolbar.addWidget(btn_add)
        toolbar.addStretch()
        toolbar.addWidget(self._btn_prev)
        toolbar.addWidget(self._btn_next)
        toolbar.addStretch()
        toolbar.addWidget(self._btn_delete)
        root.addLayout(toolbar)

        self._viewer = PhotoViewer()
        root.addWidget(self._viewer, stretch=1)

        self._filmstrip = FilmstripWidget(self._loader)
        # Queued: the clicked card is destroyed when the strip re-renders
        self._filmstrip.photo_selected.connect(
            self._on_photo_selected, Qt.ConnectionType.QueuedConnection
        )
        root.addWidget(self._filmstrip)

    # ------------------------------------------------------------------ #
    # Rendering                                                            #
    # ------------------------------------------------------------------ #

    def _render(self) -> None:
        """Redraw everything from a fresh snapshot of the gallery."""
        snapshot = self._gallery.snapshot()
        self._filmstrip.render_snapshot(snapshot)

        photo = snapshot.current
        for btn in (self._btn_prev, self._btn_next, self._btn_delete):
            btn.setEnabled(photo is not None)
        self.statusBar().setToolTip(self._gallery.describe())
        logger.debug("Gallery: %s", self._gallery.describe())

        if photo is None:
            self._viewer.show_empty()
            self.statusBar().showMessage("Gallery empty")
            return

        self.statusBar().showMessage(
            f"Now viewing: {photo.name} ({snapshot.current_index + 1}/{len(snapshot.items)})"
        )
        pixmap = self._loader.cached(photo.url)
        if pixmap is not None:
            self._viewer.show_photo(pixmap, photo.name)
        else:
            self._viewer.show_loading(photo.name)
            self._loader.request(photo.url)

    def _on_image_loaded(self, url: str, pixmap: QPixmap) -> None:
        # The cursor may have moved while the fetch was outstanding
        photo = self._gallery.snapshot().current
        if photo is None or photo.url != url:
            return
        self._viewer.show_photo(pixmap, photo.name)

    def _on_image_failed(self, url: str, message: str) -> None:
        photo = self._gallery.snapshot().current
        if photo is None or photo.url != url:
            return
        self._viewer.show_unavailable(photo.name)

    # ------------------------------------------------------------------ #
    # Toolbar and keyboard actions                                         #
    # ------------------------------------------------------------------ #

    def _on_add_photo(self):
        name, ok = QInputDialog.getText(self, "Add photo", "Photo name:")
        name = name.strip()
        if ok and name:
            self._gallery.insert(name)
            self._render()
            self._filmstrip.scroll_to_end()

    def _on_next(self):
        self._gallery.next()
        self._render()

    def _on_previous(self):
        self._gallery.previous()
        self._render()

    def _on_delete_current(self):
        photo = self._gallery.current
        if photo is None:
            return
        self.delete_photo(photo.name)

    def _on_photo_selected(self, index: int) -> None:
        # Queued clicks can arrive after a delete has shortened the gallery
        if index >= len(self._gallery):
            logger.debug("Ignoring click on stale filmstrip index %d", index)
            return
        self._gallery.select_at(index)
        self._render()

    def delete_photo(self, name: str) -> None:
        try:
            self._gallery.delete(name)
        except PhotoNotFound as exc:
            QMessageBox.warning(self, "Delete photo", str(exc))
            return
        self._render()

    # ------------------------------------------------------------------ #
    # Save on close                                                        #
    # ------------------------------------------------------------------ #

    def _save(self):
        self._settings.window_width = self.width()
        self._settings.window_height = self.height()
        try:
            storage.save(self._settings)
        except OSError as exc:
            logger.error("Could not save settings: %s", exc)

    def closeEvent(self, event):
        self._save()
        event.accept()
