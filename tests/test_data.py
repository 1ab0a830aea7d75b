"""Tests for the photo list and its current-photo cursor."""

import logging

import pytest

from data import CursorList, Photo, PhotoNotFound, Snapshot


def _gallery(*names: str) -> CursorList:
    gallery = CursorList()
    for name in names:
        gallery.insert(name)
    return gallery


def _names(gallery: CursorList) -> list[str]:
    return [photo.name for photo in gallery.snapshot().items]


class TestInsert:

    def test_empty_gallery_has_no_cursor(self):
        gallery = CursorList()
        assert len(gallery) == 0
        assert gallery.cursor is None
        assert gallery.current is None

    def test_inserts_keep_order(self):
        gallery = _gallery("b", "a", "c", "a")
        assert len(gallery) == 4
        assert _names(gallery) == ["b", "a", "c", "a"]

    def test_first_insert_sets_cursor(self):
        gallery = _gallery("a")
        assert gallery.cursor == 0
        assert gallery.current.name == "a"

    def test_insert_into_non_empty_keeps_cursor(self):
        gallery = _gallery("a", "b", "c")
        gallery.next()
        gallery.insert("d")
        assert gallery.cursor == 1
        assert gallery.current.name == "b"

    def test_locators_derived_from_name(self):
        gallery = _gallery("sunset")
        photo = gallery.current
        assert photo.url == "https://picsum.photos/seed/sunset/1200/800"
        assert photo.thumb_url == "https://picsum.photos/seed/sunset/200/300"

    def test_custom_base_url(self):
        gallery = CursorList(base_url="http://localhost:8000/")
        gallery.insert("x")
        assert gallery.current.url == "http://localhost:8000/seed/x/1200/800"


class TestPhoto:

    def test_same_name_same_locators(self):
        assert Photo.from_name("beach day") == Photo.from_name("beach day")

    def test_name_is_percent_encoded(self):
        photo = Photo.from_name("my cat/dog & it's")
        assert photo.url == "https://picsum.photos/seed/my%20cat%2Fdog%20%26%20it's/1200/800"

    def test_photo_is_immutable(self):
        photo = Photo.from_name("a")
        with pytest.raises(AttributeError):
            photo.name = "b"


class TestNavigation:

    def test_next_advances_and_wraps(self):
        gallery = _gallery("a", "b", "c")
        gallery.next()
        assert gallery.cursor == 1
        gallery.next()
        assert gallery.cursor == 2
        gallery.next()
        assert gallery.cursor == 0  # Wrapped

    def test_previous_wraps_to_last(self):
        gallery = _gallery("a", "b", "c")
        gallery.previous()
        assert gallery.cursor == 2
        gallery.previous()
        assert gallery.cursor == 1

    def test_next_full_cycle_returns_to_start(self):
        gallery = _gallery("a", "b", "c", "d", "e")
        for start in range(len(gallery)):
            gallery.select_at(start)
            for _ in range(len(gallery)):
                gallery.next()
            assert gallery.cursor == start

    def test_previous_is_inverse_of_next(self):
        gallery = _gallery("a", "b", "c", "d")
        for start in range(len(gallery)):
            gallery.select_at(start)
            gallery.next()
            gallery.previous()
            assert gallery.cursor == start
            gallery.previous()
            gallery.next()
            assert gallery.cursor == start

    def test_single_photo_stays_put(self):
        gallery = _gallery("only")
        gallery.next()
        assert gallery.cursor == 0
        gallery.previous()
        assert gallery.cursor == 0

    def test_navigation_on_empty_is_noop(self):
        gallery = CursorList()
        gallery.next()
        gallery.previous()
        assert gallery.cursor is None

    def test_select_at(self):
        gallery = _gallery("a", "b", "c")
        gallery.select_at(2)
        assert gallery.current.name == "c"

    @pytest.mark.parametrize("index", [-1, 3, 10])
    def test_select_at_out_of_range(self, index):
        gallery = _gallery("a", "b", "c")
        with pytest.raises(IndexError):
            gallery.select_at(index)
        assert gallery.cursor == 0

    def test_select_at_on_empty(self):
        with pytest.raises(IndexError):
            CursorList().select_at(0)


class TestDelete:

    def test_delete_current_middle_moves_to_successor(self):
        gallery = _gallery("a", "b", "c")
        gallery.select_at(1)
        gallery.delete("b")
        assert _names(gallery) == ["a", "c"]
        assert gallery.cursor == 1
        assert gallery.current.name == "c"

    def test_delete_current_first_moves_to_successor(self):
        gallery = _gallery("a", "b", "c")
        gallery.delete("a")
        assert gallery.cursor == 0
        assert gallery.current.name == "b"

    def test_delete_current_last_wraps_to_first(self):
        gallery = _gallery("a", "b", "c")
        gallery.select_at(2)
        gallery.delete("c")
        assert _names(gallery) == ["a", "b"]
        assert gallery.cursor == 0
        assert gallery.current.name == "a"

    def test_delete_before_current_shifts_cursor(self):
        gallery = _gallery("a", "b", "c", "d")
        gallery.select_at(2)
        current = gallery.current
        gallery.delete("a")
        assert gallery.cursor == 1
        assert gallery.current is current

    def test_delete_after_current_keeps_cursor(self):
        gallery = _gallery("a", "b", "c", "d")
        gallery.select_at(1)
        gallery.delete("d")
        assert gallery.cursor == 1
        assert gallery.current.name == "b"

    def test_delete_only_photo_unsets_cursor(self):
        gallery = _gallery("a")
        gallery.delete("a")
        assert len(gallery) == 0
        assert gallery.cursor is None
        gallery.next()
        gallery.previous()
        assert gallery.cursor is None
        assert gallery.snapshot() == Snapshot()

    def test_delete_missing_raises_and_keeps_state(self):
        gallery = _gallery("a", "b", "c")
        gallery.next()
        before = gallery.snapshot()
        with pytest.raises(PhotoNotFound) as excinfo:
            gallery.delete("absent-name")
        assert excinfo.value.name == "absent-name"
        assert str(excinfo.value) == "Photo 'absent-name' not found!"
        assert gallery.snapshot() == before

    def test_delete_on_empty_raises(self):
        with pytest.raises(PhotoNotFound):
            CursorList().delete("a")

    def test_not_found_is_a_lookup_error(self):
        assert issubclass(PhotoNotFound, LookupError)

    def test_delete_duplicate_removes_first_match(self):
        gallery = _gallery("a", "dup", "b", "dup")
        gallery.select_at(3)
        gallery.delete("dup")
        assert _names(gallery) == ["a", "b", "dup"]
        assert gallery.cursor == 2
        assert gallery.current.name == "dup"

    def test_delete_current_duplicate_moves_to_next_copy(self):
        gallery = _gallery("dup", "dup")
        gallery.delete("dup")
        assert _names(gallery) == ["dup"]
        assert gallery.cursor == 0

    def test_walkthrough(self):
        gallery = _gallery("a", "b", "c")
        assert gallery.cursor == 0

        gallery.next()
        gallery.next()
        assert gallery.current.name == "c"
        assert gallery.cursor == 2

        gallery.delete("a")
        assert _names(gallery) == ["b", "c"]
        assert gallery.cursor == 1
        assert gallery.current.name == "c"

        gallery.delete("c")
        assert _names(gallery) == ["b"]
        assert gallery.cursor == 0
        assert gallery.current.name == "b"


class TestSnapshot:

    def test_snapshot_reports_items_and_current(self):
        gallery = _gallery("a", "b")
        gallery.next()
        snapshot = gallery.snapshot()
        assert snapshot.current_index == 1
        assert snapshot.current.name == "b"
        assert [p.name for p in snapshot.items] == ["a", "b"]

    def test_empty_snapshot(self):
        snapshot = CursorList().snapshot()
        assert snapshot.items == ()
        assert snapshot.current_index is None
        assert snapshot.current is None

    def test_snapshot_is_detached_from_later_changes(self):
        gallery = _gallery("a", "b")
        snapshot = gallery.snapshot()
        gallery.insert("c")
        gallery.delete("a")
        gallery.next()
        assert [p.name for p in snapshot.items] == ["a", "b"]
        assert snapshot.current_index == 0

    def test_snapshot_does_not_mutate(self):
        gallery = _gallery("a", "b", "c")
        gallery.select_at(1)
        assert gallery.snapshot() == gallery.snapshot()
        assert gallery.cursor == 1


class TestDescribe:

    def test_describe_empty(self):
        assert CursorList().describe() == "Gallery Empty!"

    def test_describe_lists_photos_in_order(self):
        assert _gallery("a", "b", "c").describe() == "[a] <-> [b] <-> [c] <-> NULL"


def test_mutations_are_logged(caplog):
    gallery = CursorList()
    with caplog.at_level(logging.INFO, logger="data"):
        gallery.insert("a")
        gallery.delete("a")
        with pytest.raises(PhotoNotFound):
            gallery.delete("a")
    messages = [record.getMessage() for record in caplog.records]
    assert messages == [
        "Photo 'a' added.",
        "Photo 'a' deleted.",
        "Photo 'a' not found!",
    ]
