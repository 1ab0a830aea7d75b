"""Asynchronous image fetching over QtNetwork with an in-memory pixmap cache."""

import logging

from PySide6.QtCore import QObject, Signal, QUrl
from PySide6.QtGui import QPixmap
from PySide6.QtNetwork import QNetworkAccessManager, QNetworkRequest, QNetworkReply

logger = logging.getLogger(__name__)


class ImageLoader(QObject):
    """Fetches images by URL and announces the result with a signal.

    Results only carry the URL they were requested for. Listeners must decide
    for themselves whether that URL is still wanted, since the user may have
    moved on while the request was in flight.
    """
    loaded = Signal(str, QPixmap)   # url, pixmap
    failed = Signal(str, str)       # url, error message

    def __init__(self, parent=None):
        super().__init__(parent)
        self._manager = QNetworkAccessManager(self)
        self._cache: dict[str, QPixmap] = {}
        self._pending: dict[str, QNetworkReply] = {}

    def cached(self, url: str) -> QPixmap | None:
        return self._cache.get(url)

    def request(self, url: str) -> None:
        if url in self._cache or url in self._pending:
            return
        logger.debug("Fetching %s", url)
        reply = self._manager.get(QNetworkRequest(QUrl(url)))
        reply.finished.connect(lambda url=url, reply=reply: self._on_finished(url, reply))
        self._pending[url] = reply

    def _on_finished(self, url: str, reply: QNetworkReply) -> None:
        self._pending.pop(url, None)
        reply.deleteLater()

        if reply.error() != QNetworkReply.NetworkError.NoError:
            logger.warning("Failed to fetch %s: %s", url, reply.errorString())
            self.failed.emit(url, reply.errorString())
            return

        pixmap = QPixmap()
        if not pixmap.loadFromData(reply.readAll()):
            logger.warning("Could not decode image data from %s", url)
            self.failed.emit(url, "undecodable image data")
            return

        self._cache[url] = pixmap
        self.loaded.emit(url, pixmap)
