"""Unit tests for vaultwalk.domain.path."""

import pytest

from vaultwalk.constants import MAX_DEPTH
from vaultwalk.domain.path import PathError, VaultPath
from vaultwalk.models import Entry


class TestDecode:
    def test_three_segments(self):
        """
        Given the raw path a/b/c
        When VaultPath.decode is called
        Then a and b are directories, c is a leaf, and the views match
        """
        path = VaultPath.decode("a/b/c")
        assert list(path) == [
            Entry("a", is_directory=True),
            Entry("b", is_directory=True),
            Entry("c", is_directory=False),
        ]
        assert path.joined() == "a/b/c"
        assert len(path) == 3
        assert path.display_width() == 6

    def test_trailing_separator_makes_last_a_directory(self):
        """
        Given a raw path ending with a separator
        When decoded
        Then every entry is a directory
        """
        path = VaultPath.decode("secret/apps/")
        assert all(entry.is_directory for entry in path)
        assert path.joined() == "secret/apps/"

    def test_empty_segments_are_dropped(self):
        """
        Given a raw path with leading, doubled and trailing separators
        When decoded
        Then the empty segments are ignored
        """
        path = VaultPath.decode("/secret//apps/")
        assert [entry.name for entry in path] == ["secret", "apps"]
        assert path.joined() == "secret/apps/"

    def test_empty_string_is_empty_path(self):
        path = VaultPath.decode("")
        assert len(path) == 0
        assert path.joined() == ""

    def test_root_len_is_decoded_length(self):
        """
        Given a decoded path
        When inspecting root_len
        Then it equals the number of decoded entries
        """
        assert VaultPath.decode("secret/apps/").root_len == 2

    @pytest.mark.parametrize("names", [["secret"], ["secret", "apps", "backend"], ["a"] * 5])
    def test_roundtrip_of_pushed_path(self, names):
        """
        Given a path built by pushing directories
        When its joined form is decoded again
        Then the same path comes back
        """
        path = VaultPath()
        for name in names:
            path.push(Entry(name, is_directory=True))
        assert VaultPath.decode(path.joined()) == path


class TestPushPop:
    def test_push_appends_directory(self):
        path = VaultPath.decode("secret/")
        path.push(Entry("apps", is_directory=True))
        assert path.joined() == "secret/apps/"
        assert list(path)[-1] == Entry("apps", is_directory=True)

    def test_push_leaf_is_refused(self):
        """
        Given a path
        When a leaf entry is pushed
        Then PathError is raised and the path is unchanged
        """
        path = VaultPath.decode("secret/")
        with pytest.raises(PathError):
            path.push(Entry("api_key"))
        assert path.joined() == "secret/"

    def test_push_beyond_max_depth_is_refused(self):
        """
        Given a path already MAX_DEPTH entries deep
        When another directory is pushed
        Then PathError is raised
        """
        path = VaultPath.decode("d/" * MAX_DEPTH)
        assert path.can_push() is False
        with pytest.raises(PathError):
            path.push(Entry("deeper", is_directory=True))
        assert len(path) == MAX_DEPTH

    def test_pop_at_floor_is_noop(self):
        """
        Given a path at its root length
        When pop is called
        Then None is returned and the path is unchanged
        """
        path = VaultPath.decode("secret/apps/")
        assert path.pop() is None
        assert path.joined() == "secret/apps/"
        assert path.can_pop() is False

    def test_pop_above_floor_returns_last(self):
        """
        Given a path one level below its root
        When pop is called
        Then the pushed entry comes back and the path is at its root again
        """
        path = VaultPath.decode("secret/")
        path.push(Entry("apps", is_directory=True))
        assert path.pop() == Entry("apps", is_directory=True)
        assert path.joined() == "secret/"
        assert path.pop() is None

    def test_child_joins_name_onto_path(self):
        assert VaultPath.decode("secret/apps/").child("api_key") == "secret/apps/api_key"
