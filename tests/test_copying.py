import os
import stat

import pytest

from faaskit.copying import copy_files

DATA = b"open faas"


def _setup_source(root, count, mode):
    src = root / "source"
    src.mkdir()
    for i in range(1, count + 1):
        path = src / f"test-file-{i}"
        path.write_bytes(DATA)
        os.chmod(path, mode)
    return src


@pytest.mark.parametrize("mode", [0o600, 0o640, 0o644, 0o700, 0o755])
def test_copy_files_keeps_mode(tmp_path, mode):
    src = _setup_source(tmp_path, 2, mode)
    dest = tmp_path / "destination"
    dest.mkdir()

    copy_files(str(src), str(dest) + "/")

    for i in (1, 2):
        copied = dest / f"test-file-{i}"
        assert stat.S_IMODE(os.stat(copied).st_mode) == mode
        assert copied.read_bytes() == DATA


def test_copy_single_file(tmp_path):
    src = tmp_path / "a.txt"
    src.write_bytes(b"hello")
    dest = tmp_path / "b.txt"

    copy_files(src, dest)

    assert dest.read_bytes() == b"hello"


def test_copy_overwrites_existing_file(tmp_path):
    src = tmp_path / "a.txt"
    src.write_bytes(b"new")
    dest = tmp_path / "b.txt"
    dest.write_bytes(b"old content that is longer")

    copy_files(src, dest)

    assert dest.read_bytes() == b"new"


def test_copy_nested_directories(tmp_path):
    src = tmp_path / "src"
    (src / "inner" / "deeper").mkdir(parents=True)
    (src / "top.txt").write_bytes(b"top")
    (src / "inner" / "deeper" / "leaf.txt").write_bytes(b"leaf")
    dest = tmp_path / "dest"

    copy_files(src, dest)

    assert (dest / "top.txt").read_bytes() == b"top"
    assert (dest / "inner" / "deeper" / "leaf.txt").read_bytes() == b"leaf"


def test_missing_source_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        copy_files(tmp_path / "missing", tmp_path / "dest")


def test_debug_output(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("debug", "1")
    src = tmp_path / "a.txt"
    src.write_bytes(b"x")
    dest = tmp_path / "b.txt"

    copy_files(str(src), str(dest))

    assert f"cp - {src} {dest}" in capsys.readouterr().out


def test_no_debug_output_by_default(tmp_path, monkeypatch, capsys):
    monkeypatch.delenv("debug", raising=False)
    src = tmp_path / "a.txt"
    src.write_bytes(b"x")

    copy_files(src, tmp_path / "b.txt")

    assert capsys.readouterr().out == ""