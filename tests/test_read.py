import io

import pytest

import fieldio


@pytest.fixture
def tsv_file(tmp_path):
    path = tmp_path / "data.tsv"
    path.write_text("foo\tbar\tbaz\none\t two \t three\nx\ty\tz\n")
    return path


def test_version():
    assert isinstance(fieldio.__version__, str)


def test_read_rows_from_path(tsv_file):
    assert fieldio.read_rows(tsv_file) == [
        ["foo", "bar", "baz"],
        ["one", " two ", " three"],
        ["x", "y", "z"],
    ]


def test_read_rows_from_str_path(tsv_file):
    rows = fieldio.read_rows(str(tsv_file), transformations={2: str.strip})
    assert rows[1] == ["one", "two", " three"]


def test_read_rows_from_stream_does_not_close():
    stream = io.StringIO("a,b\nc,d")
    assert fieldio.read_rows(stream, delimiter=",") == [["a", "b"], ["c", "d"]]
    assert not stream.closed


def test_read_rows_errors_propagate(tsv_file):
    with pytest.raises(fieldio.UnexpectedFields):
        fieldio.read_rows(tsv_file, max_fields=2)


def test_lazy_read_rows(tsv_file):
    with fieldio.lazy_read_rows(
        tsv_file, max_fields=2, enforce_max_fields=False, ignore_overfull_row=False
    ) as rows:
        assert next(rows) == ["foo", "bar"]
        assert list(rows) == [["one", " two "], ["x", "y"]]


def test_lazy_read_rows_skips_overfull(tsv_file):
    with fieldio.lazy_read_rows(
        tsv_file, max_fields=2, enforce_max_fields=False
    ) as rows:
        assert list(rows) == []


def test_read_fields(tsv_file):
    assert fieldio.read_fields(tsv_file, 3) == [
        ["foo", "bar", "baz"],
        ["one", " two ", " three"],
        ["x", "y", "z"],
    ]


def test_lazy_read_fields():
    stream = io.StringIO("a#b;c#d;")
    with fieldio.lazy_read_fields(
        stream, 2, delimiters="#", terminators=";"
    ) as groups:
        assert list(groups) == [["a", "b"], ["c", "d"]]
