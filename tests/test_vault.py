"""Tests for the append-only credential store."""

import os
import stat

import pytest

from core import storage
from core.storage import StorageError, append_line, read_text
from vault import add_entry, format_record, load_entries, read_store


class TestAddEntry:
    """Test appending records."""

    def test_creates_store_on_first_write(self, store_file):
        assert not store_file.exists()
        add_entry("github", "octocat", "s3cret pass")
        assert store_file.read_text() == "github|octocat|s3cret pass\n"

    def test_appends_without_rewriting(self, store_file):
        add_entry("github", "octocat", "first")
        add_entry("gitlab", "tanuki", "second")
        assert store_file.read_text() == "github|octocat|first\ngitlab|tanuki|second\n"

    @pytest.mark.skipif(os.name == "nt", reason="POSIX permissions")
    def test_new_store_is_owner_only(self, store_file):
        add_entry("github", "octocat", "pw")
        mode = stat.S_IMODE(os.stat(store_file).st_mode)
        assert mode == 0o600

    @pytest.mark.parametrize("service, username, password", [
        ("git|hub", "octocat", "pw"),
        ("github", "octo|cat", "pw"),
        ("github", "octocat", "p|w"),
        ("github", "octocat", "p\nw"),
        ("github\r", "octocat", "pw"),
    ])
    def test_rejects_delimiter_and_line_breaks(self, store_file, service, username, password):
        with pytest.raises(StorageError):
            add_entry(service, username, password)
        assert not store_file.exists()

    def test_write_failure_raises_storage_error(self, tmp_path):
        missing_dir = tmp_path / "missing" / "passwords.txt"
        with pytest.raises(StorageError):
            add_entry("github", "octocat", "pw", path=str(missing_dir))

    def test_format_record(self):
        assert format_record("a", "b", "c d") == "a|b|c d"


class TestReadStore:
    """Test reading records back."""

    def test_missing_store(self, store_file):
        assert read_store() is None
        assert load_entries() == []

    def test_load_entries(self, store_file):
        add_entry("github", "octocat", "pw one")
        add_entry("mail", "me@example.com", "pw two")
        assert load_entries() == [
            ("github", "octocat", "pw one"),
            ("mail", "me@example.com", "pw two"),
        ]

    def test_load_skips_blank_and_pads_short_lines(self, store_file):
        store_file.write_text("github|octocat|pw\n\nlegacy\n")
        assert load_entries() == [("github", "octocat", "pw"), ("legacy", "", "")]

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "other.txt"
        add_entry("svc", "user", "pw", path=str(path))
        assert read_store(str(path)) == "svc|user|pw\n"


class TestStorage:
    """Test the file helpers under the store."""

    def test_read_text_missing_file(self, tmp_path):
        assert read_text(str(tmp_path / "absent.txt")) is None

    def test_only_sensitive_files_are_locked_down(self, tmp_path, monkeypatch):
        locked = []
        monkeypatch.setattr(storage, "_set_secure_permissions", locked.append)
        notes = str(tmp_path / "notes.txt")
        secrets_file = str(tmp_path / "secrets.txt")
        append_line(notes, "one")
        append_line(notes, "two")
        append_line(secrets_file, "key", sensitive=True)
        append_line(secrets_file, "key2", sensitive=True)
        assert read_text(notes) == "one\ntwo\n"
        assert locked == [secrets_file]
