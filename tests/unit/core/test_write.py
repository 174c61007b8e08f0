"""Unit tests for core/write.py"""

import logging

import pytest

from mdtangle.core.models import OutputFile
from mdtangle.core.write import file_status, resolve_path, write_file


def test_write_file_creates_parents(tmp_path):
    """Parent directories are created and the file reports 'created'."""
    written = write_file(OutputFile(path="sub/dir/x.txt", contents="hi"), tmp_path)
    assert written.path == tmp_path / "sub" / "dir" / "x.txt"
    assert written.path.read_text() == "hi"
    assert written.status == "created"


def test_write_file_status_tracks_content(tmp_path):
    """Rewriting identical content is 'unchanged'; different content is 'updated'."""
    write_file(OutputFile(path="x.txt", contents="one"), tmp_path)
    assert write_file(OutputFile(path="x.txt", contents="one"), tmp_path).status == "unchanged"
    assert write_file(OutputFile(path="x.txt", contents="two"), tmp_path).status == "updated"
    assert (tmp_path / "x.txt").read_text() == "two"


def test_write_file_final_newline(tmp_path):
    """final_newline appends a line break only when one is missing."""
    a = write_file(OutputFile(path="a.txt", contents="a"), tmp_path, final_newline=True)
    b = write_file(OutputFile(path="b.txt", contents="b\n"), tmp_path, final_newline=True)
    assert a.path.read_text() == "a\n"
    assert b.path.read_text() == "b\n"


def test_write_file_verbatim_by_default(tmp_path):
    written = write_file(OutputFile(path="a.txt", contents="a\nb"), tmp_path)
    assert written.path.read_text() == "a\nb"


def test_write_file_dry_run(tmp_path):
    """dry_run resolves the destination without touching the filesystem."""
    written = write_file(OutputFile(path="sub/x.txt", contents="hi"), tmp_path, dry_run=True)
    assert written.status == "skipped"
    assert not (tmp_path / "sub").exists()


def test_resolve_path_strips_whitespace(tmp_path):
    assert resolve_path(OutputFile(path=" out.txt ", contents=""), tmp_path) == tmp_path / "out.txt"


def test_write_file_overwrites_undecodable_file(tmp_path):
    """An existing file that does not decode is reported 'updated' and rewritten."""
    (tmp_path / "out.bin").write_bytes(b"\xff\xfe\xfa")
    written = write_file(OutputFile(path="out.bin", contents="text"), tmp_path)
    assert written.status == "updated"
    assert written.path.read_text() == "text"


def test_file_status_compares_encoded_bytes(tmp_path):
    dest = tmp_path / "latin.txt"
    dest.write_bytes("café".encode("latin-1"))
    assert file_status(dest, "café", encoding="latin-1") == "unchanged"
    assert file_status(dest, "café", encoding="utf-8") == "updated"


@pytest.mark.parametrize("name", ["../escape.txt", "sub/../../escape.txt"])
def test_resolve_path_outside_base_warns(tmp_path, caplog, name):
    """Destinations leaving the base directory are logged as a warning."""
    base = tmp_path / "base"
    with caplog.at_level(logging.WARNING, logger="mdtangle.core.write"):
        dest = resolve_path(OutputFile(path=name, contents=""), base)
    assert dest == base / name
    assert "resolves outside" in caplog.text


def test_resolve_path_absolute_warns(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="mdtangle.core.write"):
        dest = resolve_path(OutputFile(path=str(tmp_path / "abs.txt"), contents=""), tmp_path / "base")
    assert dest == tmp_path / "abs.txt"
    assert "resolves outside" in caplog.text


def test_resolve_path_inside_base_is_quiet(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="mdtangle.core.write"):
        resolve_path(OutputFile(path="sub/../x.txt", contents=""), tmp_path)
    assert caplog.text == ""
