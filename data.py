"""In-memory data model for the gallery: photos and the current-photo cursor."""

import logging
from dataclasses import dataclass, field
from urllib.parse import quote

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://picsum.photos"
IMAGE_SIZE = (1200, 800)
THUMB_SIZE = (200, 300)

# Characters encodeURIComponent leaves alone on top of quote()'s defaults
_SAFE_CHARS = "!*'()"


class PhotoNotFound(LookupError):
    """Raised when a delete-by-name finds no photo with that name."""

    def __init__(self, name: str):
        super().__init__(f"Photo '{name}' not found!")
        self.name = name


@dataclass(frozen=True)
class Photo:
    name: str
    url: str
    thumb_url: str

    @classmethod
    def from_name(cls, name: str, base_url: str = DEFAULT_BASE_URL) -> "Photo":
        seed = f"{base_url.rstrip('/')}/seed/{quote(name, safe=_SAFE_CHARS)}"
        return cls(
            name=name,
            url=f"{seed}/{IMAGE_SIZE[0]}/{IMAGE_SIZE[1]}",
            thumb_url=f"{seed}/{THUMB_SIZE[0]}/{THUMB_SIZE[1]}",
        )


@dataclass(frozen=True)
class Snapshot:
    items: tuple[Photo, ...] = ()
    current_index: int | None = None

    @property
    def current(self) -> Photo | None:
        if self.current_index is None:
            return None
        return self.items[self.current_index]


@dataclass
class CursorList:
    """Ordered photos plus a cursor on the one being viewed.

    The cursor is None exactly when there are no photos; otherwise it is a
    valid index. Navigation wraps around at both ends. Deleting the current
    photo moves the cursor to its successor, or back to the first photo when
    the tail was deleted.
    """
    base_url: str = DEFAULT_BASE_URL
    items: list[Photo] = field(default_factory=list, init=False)
    cursor: int | None = field(default=None, init=False)

    def __len__(self) -> int:
        return len(self.items)

    @property
    def current(self) -> Photo | None:
        if self.cursor is None:
            return None
        return self.items[self.cursor]

    def insert(self, name: str) -> None:
        self.items.append(Photo.from_name(name, self.base_url))
        if self.cursor is None:
            self.cursor = 0
        logger.info("Photo '%s' added.", name)

    def delete(self, name: str) -> None:
        index = self._find(name)
        if index is None:
            logger.info("Photo '%s' not found!", name)
            raise PhotoNotFound(name)

        was_current = index == self.cursor
        del self.items[index]

        if not self.items:
            self.cursor = None
        elif was_current:
            # The successor slid into the freed slot; deleting the tail wraps
            if index >= len(self.items):
                self.cursor = 0
        elif index < self.cursor:
            self.cursor -= 1
        logger.info("Photo '%s' deleted.", name)

    def next(self) -> None:
        if self.cursor is None:
            return
        self.cursor = self.cursor + 1 if self.cursor < len(self.items) - 1 else 0
        logger.debug("Now viewing: %s", self.items[self.cursor].name)

    def previous(self) -> None:
        if self.cursor is None:
            return
        self.cursor = self.cursor - 1 if self.cursor > 0 else len(self.items) - 1
        logger.debug("Now viewing: %s", self.items[self.cursor].name)

    def select_at(self, index: int) -> None:
        if not 0 <= index < len(self.items):
            raise IndexError(f"photo index {index} out of range")
        self.cursor = index
        logger.debug("Now viewing: %s", self.items[index].name)

    def snapshot(self) -> Snapshot:
        return Snapshot(items=tuple(self.items), current_index=self.cursor)

    def describe(self) -> str:
        """Render the gallery on one line, e.g. ``[a] <-> [b] <-> NULL``."""
        if not self.items:
            return "Gallery Empty!"
        return "".join(f"[{photo.name}] <-> " for photo in self.items) + "NULL"

    def _find(self, name: str) -> int | None:
        for i, photo in enumerate(self.items):
            if photo.name == name:
                return i
        return None
