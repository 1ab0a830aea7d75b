"""Horizontal strip of thumbnails with the current photo marked."""

from PySide6.QtWidgets import QListWidget, QListWidgetItem, QListView, QAbstractItemView
from PySide6.QtCore import Qt, Signal, QTimer
from PySide6.QtGui import QPixmap

import style
from data import Photo, Snapshot
from image_loader import ImageLoader
from thumb_card import ThumbCard


_THUMB_URL_ROLE = Qt.ItemDataRole.UserRole
_SCROLL_DELAY_MS = 100


class FilmstripWidget(QListWidget):
    """
    Shows every photo of a snapshot as a ThumbCard, left to right.
    The strip is rebuilt from scratch on each render; it never holds on to
    indices between renders. Clicking a card emits photo_selected(index).
    """
    photo_selected = Signal(int)

    def __init__(self, loader: ImageLoader, parent=None):
        super().__init__(parent)
        self._loader = loader
        self._loader.loaded.connect(self._on_thumb_loaded)

        self.setFlow(QListView.Flow.LeftToRight)
        self.setWrapping(False)
        self.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        self.setHorizontalScrollMode(QAbstractItemView.ScrollMode.ScrollPerPixel)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        # Arrow keys belong to the window's navigation shortcuts
        self.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.setFixedHeight(style.FILMSTRIP_HEIGHT)
        self.setSpacing(4)
        self.setStyleSheet(
            f"QListWidget {{ border: none; background: {style.FILMSTRIP_BG}; }}"
            "QListWidget::item { background: transparent; }"
        )

    # ------------------------------------------------------------------ #
    # Public helpers (called by the window)                                #
    # ------------------------------------------------------------------ #

    def render_snapshot(self, snapshot: Snapshot) -> None:
        self.clear()
        for index, photo in enumerate(snapshot.items):
            self._append_card(index, photo, index == snapshot.current_index)
        if snapshot.current_index is not None:
            self.scrollToItem(
                self.item(snapshot.current_index),
                QAbstractItemView.ScrollHint.PositionAtCenter,
            )

    def scroll_to_end(self) -> None:
        # Give the freshly added card a moment to be laid out first
        QTimer.singleShot(_SCROLL_DELAY_MS, self._scroll_to_end_now)

    # ------------------------------------------------------------------ #
    # Private helpers                                                      #
    # ------------------------------------------------------------------ #

    def _append_card(self, index: int, photo: Photo, active: bool) -> None:
        item = QListWidgetItem()
        item.setData(_THUMB_URL_ROLE, photo.thumb_url)
        self.addItem(item)

        card = ThumbCard(photo.name, self)
        card.set_active(active)
        card.clicked.connect(lambda index=index: self.photo_selected.emit(index))
        pixmap = self._loader.cached(photo.thumb_url)
        if pixmap is not None:
            card.set_pixmap(pixmap)
        else:
            self._loader.request(photo.thumb_url)

        self.setItemWidget(item, card)
        item.setSizeHint(card.sizeHint())

    def _on_thumb_loaded(self, url: str, pixmap: QPixmap) -> None:
        # Duplicate names share a thumbnail, so update every matching card
        for i in range(self.count()):
            item = self.item(i)
            if item.data(_THUMB_URL_ROLE) == url:
                card = self.itemWidget(item)
                if card:
                    card.set_pixmap(pixmap)

    def _scroll_to_end_now(self) -> None:
        bar = self.horizontalScrollBar()
        bar.setValue(bar.maximum())
