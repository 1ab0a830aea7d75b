"""Custom widget for a single filmstrip entry: a thumbnail above a caption."""

from PySide6.QtWidgets import QFrame, QLabel, QVBoxLayout, QSizePolicy
from PySide6.QtCore import Qt, Signal, QSize
from PySide6.QtGui import QPixmap

import style


class ThumbCard(QFrame):
    """One photo in the filmstrip. Clicking it asks for that photo to be shown."""
    clicked = Signal()

    def __init__(self, name: str, parent=None):
        super().__init__(parent)
        self._active = False
        self.setObjectName("thumbCard")  # keeps the border rule off the child labels
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setToolTip(name)
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(2, 2, 2, 2)
        layout.setSpacing(2)

        self.image_label = QLabel(self)
        self.image_label.setFixedSize(style.THUMB_WIDTH, style.THUMB_HEIGHT)
        self.image_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.image_label.setStyleSheet(f"background: {style.THUMB_PLACEHOLDER_BG};")

        self.caption = QLabel(name, self)
        self.caption.setFixedHeight(style.THUMB_CAPTION_HEIGHT)
        self.caption.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.caption.setStyleSheet(f"color: {style.VIEWER_TEXT}; font-size: 11px;")
        metrics = self.caption.fontMetrics()
        self.caption.setText(
            metrics.elidedText(name, Qt.TextElideMode.ElideRight, style.THUMB_WIDTH)
        )

        layout.addWidget(self.image_label)
        layout.addWidget(self.caption)
        self._apply_border()

    def set_pixmap(self, pixmap: QPixmap) -> None:
        self.image_label.setPixmap(pixmap.scaled(
            self.image_label.size(),
            Qt.AspectRatioMode.KeepAspectRatioByExpanding,
            Qt.TransformationMode.SmoothTransformation,
        ))

    def set_active(self, active: bool) -> None:
        if active != self._active:
            self._active = active
            self._apply_border()

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit()
            event.accept()
            return
        super().mousePressEvent(event)

    def sizeHint(self) -> QSize:
        return QSize(style.THUMB_WIDTH + 2 * style.THUMB_ACTIVE_BORDER_WIDTH + 4,
                     style.THUMB_HEIGHT + style.THUMB_CAPTION_HEIGHT + 12)

    def _apply_border(self):
        if self._active:
            border = f"{style.THUMB_ACTIVE_BORDER_WIDTH}px solid {style.THUMB_ACTIVE_BORDER}"
        else:
            border = f"{style.THUMB_ACTIVE_BORDER_WIDTH}px solid transparent"
        self.setStyleSheet(
            f"QFrame#thumbCard {{ border: {border}; border-radius: 4px;"
            f" background: {style.FILMSTRIP_BG}; }}"
        )
