import io
import os
import tarfile

import pytest

from dome.paths import (
    FileKind,
    file_info,
    get_base_path,
    is_path_absolute,
    path_base,
    read_entire_file,
    read_file_from_tar,
    resolve_path,
    set_base_path,
    write_entire_file,
)


@pytest.fixture
def base(tmp_path):
    set_base_path(str(tmp_path))
    return str(tmp_path) + "/"


def _make_tar(path, members):
    with tarfile.open(path, "w") as tar:
        for name, data in members:
            info = tarfile.TarInfo(name)
            info.size = len(data)
            tar.addfile(info, io.BytesIO(data))


def test_set_base_path_adds_trailing_slash(tmp_path):
    set_base_path(str(tmp_path))
    assert get_base_path() == str(tmp_path) + "/"


def test_set_base_path_keeps_existing_slash(tmp_path):
    set_base_path(str(tmp_path) + "/")
    assert get_base_path() == str(tmp_path) + "/"


def test_resolve_relative_path(base):
    assert resolve_path("main.wren") == base + "main.wren"


def test_resolve_absolute_path_unchanged(base):
    assert resolve_path("/etc/game.egg") == "/etc/game.egg"


def test_path_base_relative_and_absolute(base):
    assert path_base("assets/a.png") == base + "assets/a.png"
    assert path_base("/abs/a.png") == "/abs/a.png"


def test_is_path_absolute():
    assert is_path_absolute("/game") is True
    assert is_path_absolute("game") is False
    assert is_path_absolute("") is False


def test_file_info_kinds(tmp_path):
    f = tmp_path / "x.txt"
    f.write_bytes(b"hi")
    assert file_info(tmp_path) is FileKind.DIRECTORY
    assert file_info(f) is FileKind.FILE
    assert file_info(tmp_path / "missing") is FileKind.NONE


def test_write_then_read_round_trip(tmp_path):
    target = tmp_path / "save.dat"
    payload = bytes(range(256))
    write_entire_file(target, payload)
    assert read_entire_file(target) == payload


def test_write_overwrites_existing(tmp_path):
    target = tmp_path / "save.dat"
    write_entire_file(target, b"longer content")
    write_entire_file(target, "new")
    assert read_entire_file(target) == b"new"


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_entire_file(tmp_path / "nope")


def test_write_into_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        write_entire_file(tmp_path / "no" / "such" / "file", b"x")


@pytest.mark.parametrize("stored", ["main.wren", "./main.wren", "/main.wren"])
def test_read_from_tar_matches_name_forms(tmp_path, stored):
    bundle = tmp_path / "game.egg"
    _make_tar(bundle, [("other.txt", b"nope"), (stored, b"class Game {}")])
    assert read_file_from_tar(bundle, "main.wren") == b"class Game {}"


def test_read_from_tar_first_match_wins(tmp_path):
    bundle = tmp_path / "game.egg"
    _make_tar(bundle, [("./a.txt", b"first"), ("a.txt", b"second")])
    assert read_file_from_tar(bundle, "a.txt") == b"first"


def test_read_from_tar_missing_member_raises(tmp_path):
    bundle = tmp_path / "game.egg"
    _make_tar(bundle, [("a.txt", b"data")])
    with pytest.raises(FileNotFoundError):
        read_file_from_tar(bundle, "b.txt")


def test_read_from_tar_rejects_non_tar(tmp_path):
    bogus = tmp_path / "bogus.egg"
    bogus.write_bytes(os.urandom(16) + b"not a tar")
    with pytest.raises(tarfile.ReadError):
        read_file_from_tar(bogus, "main.wren")