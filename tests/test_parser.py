import io

import pytest

from solong.parser import MapError, parse_map, read_lines

VALID = ["11111", "1PCE1", "11111"]


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8", newline="")
    return path


def test_read_lines_strips_line_breaks():
    text = "\n".join(VALID) + "\n"
    assert list(read_lines(io.StringIO(text))) == VALID


def test_read_lines_keeps_last_line_without_break():
    text = "\n".join(VALID)
    assert list(read_lines(io.StringIO(text))) == VALID


def test_read_lines_empty_stream():
    assert list(read_lines(io.StringIO(""))) == []


def test_parse_valid_map(tmp_path):
    path = _write(tmp_path, "level.ber", "\n".join(VALID) + "\n")
    assert parse_map(path) == VALID


def test_parse_accepts_string_path(tmp_path):
    path = _write(tmp_path, "level.ber", "\n".join(VALID))
    assert parse_map(str(path)) == VALID


@pytest.mark.parametrize("name", ["level.txt", ".ber", "ber", "levelber"])
def test_wrong_extension(name):
    with pytest.raises(MapError, match="File format error"):
        parse_map(name)


def test_missing_file(tmp_path):
    with pytest.raises(MapError, match="File open error"):
        parse_map(tmp_path / "missing.ber")


def test_invalid_map(tmp_path):
    path = _write(tmp_path, "bad.ber", "11111\n1P0E1\n11111\n")
    with pytest.raises(MapError, match="Map Error"):
        parse_map(path)


def test_empty_file(tmp_path):
    path = _write(tmp_path, "empty.ber", "")
    with pytest.raises(MapError, match="Map Error"):
        parse_map(path)


def test_carriage_returns_are_not_tiles(tmp_path):
    path = _write(tmp_path, "crlf.ber", "\r\n".join(VALID) + "\r\n")
    with pytest.raises(MapError, match="Map Error"):
        parse_map(path)