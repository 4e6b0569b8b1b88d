"""Unit tests for domain models."""

import dataclasses

import pytest

from vaultwalk.models import Entry, Severity, StatusMessage


class TestEntryDecode:
    @pytest.mark.parametrize("raw", ["apps/", "key1/", "a.b-c_d/"])
    def test_trailing_separator_marks_directory(self, raw):
        """
        Given a raw listing key ending with a separator
        When Entry.decode is called
        Then the entry is a directory and its name has no separator
        """
        entry = Entry.decode(raw)
        assert entry.is_directory is True
        assert "/" not in entry.name
        assert entry.name == raw[:-1]

    @pytest.mark.parametrize("raw", ["api_key", "key", "jwt.secret"])
    def test_plain_key_is_leaf(self, raw):
        """
        Given a raw listing key without a trailing separator
        When Entry.decode is called
        Then the entry is a leaf named exactly like the key
        """
        entry = Entry.decode(raw)
        assert entry.is_directory is False
        assert entry.name == raw

    def test_encode_restores_raw_key(self):
        """
        Given directory and leaf entries
        When encode is called
        Then the raw key form is returned
        """
        assert Entry.decode("apps/").encode() == "apps/"
        assert Entry.decode("api_key").encode() == "api_key"


class TestEntryImmutability:
    def test_entry_is_frozen(self):
        """
        Given a decoded Entry
        When we try to change its name
        Then FrozenInstanceError is raised
        """
        entry = Entry.decode("apps/")
        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.name = "other"  # type: ignore[misc]

    def test_equality(self):
        """
        Given two entries decoded from the same raw key
        When compared with ==
        Then they are equal
        """
        assert Entry.decode("apps/") == Entry("apps", is_directory=True)


class TestStatusMessage:
    def test_default_severity_is_info(self):
        assert StatusMessage("hello").severity is Severity.INFO

    def test_error_constructor(self):
        """
        Given an error message built with StatusMessage.error
        When inspecting its severity
        Then it is ERROR
        """
        message = StatusMessage.error("boom")
        assert message.text == "boom"
        assert message.severity is Severity.ERROR
