# =============================================================================
# tests/test_csv_pipe.py - CSV to JSON Lines Tests
# =============================================================================

import io
import json
import runpy
import shutil
from pathlib import Path

from users_api.csv_pipe import convert_csv_to_json_lines, iter_rows


def _read_lines(path):
    return [json.loads(line) for line in Path(path).read_text(encoding="utf-8").splitlines()]


class TestConvert:

    def test_one_object_per_row(self, tmp_path):
        source = tmp_path / "books.csv"
        target = tmp_path / "parsed.txt"
        source.write_text("Book,Author,Amount,Price\nDune,Frank Herbert,3,9.99\nEmma,Jane Austen,1,4.5\n", encoding="utf-8")

        count = convert_csv_to_json_lines(source, target)

        assert count == 2
        assert _read_lines(target) == [
            {"Book": "Dune", "Author": "Frank Herbert", "Amount": "3", "Price": "9.99"},
            {"Book": "Emma", "Author": "Jane Austen", "Amount": "1", "Price": "4.5"},
        ]

    def test_overwrites_target(self, tmp_path):
        source = tmp_path / "in.csv"
        target = tmp_path / "out.txt"
        source.write_text("a\n1\n", encoding="utf-8")
        target.write_text("stale\nstale\nstale\n", encoding="utf-8")

        convert_csv_to_json_lines(source, target)

        assert _read_lines(target) == [{"a": "1"}]

    def test_header_only(self, tmp_path):
        source = tmp_path / "in.csv"
        target = tmp_path / "out.txt"
        source.write_text("a,b\n", encoding="utf-8")

        assert convert_csv_to_json_lines(source, target) == 0
        assert target.read_text(encoding="utf-8") == ""

    def test_bundled_sample(self, tmp_path):
        sample = Path(__file__).resolve().parent.parent / "csv" / "nodejs-hw1-ex1.csv"
        target = tmp_path / "parsed.txt"

        count = convert_csv_to_json_lines(sample, target)

        rows = _read_lines(target)
        assert count == len(rows) == 5
        assert set(rows[0]) == {"Book", "Author", "Amount", "Price"}


class TestIterRows:

    def test_cells_are_trimmed(self):
        stream = io.StringIO(" a , b \n  1 ,two  \n")

        assert list(iter_rows(stream)) == [{"a": "1", "b": "two"}]

    def test_whitespace_only_row_is_blank(self):
        stream = io.StringIO("a,b\n  ,  \n1,2\n")

        assert list(iter_rows(stream)) == [{"a": "1", "b": "2"}]

    def test_quoted_cells_and_blank_lines(self):
        stream = io.StringIO('name,quote\n"Doe, John","said ""hi"""\n\n')

        assert list(iter_rows(stream)) == [{"name": "Doe, John", "quote": 'said "hi"'}]

    def test_ragged_rows(self):
        stream = io.StringIO("a,b\n1\n1,2,3\n")

        assert list(iter_rows(stream)) == [
            {"a": "1", "b": ""},
            {"a": "1", "b": "2", "field3": "3"},
        ]

    def test_custom_delimiter(self):
        stream = io.StringIO("a;b\n1;2\n")

        assert list(iter_rows(stream, delimiter=";")) == [{"a": "1", "b": "2"}]

    def test_empty_stream(self):
        assert list(iter_rows(io.StringIO(""))) == []


class TestScript:
    """csv_to_text.py reads and writes fixed paths relative to the working directory."""

    def test_converts_fixed_paths(self, tmp_path, monkeypatch):
        root = Path(__file__).resolve().parent.parent
        (tmp_path / "csv").mkdir()
        shutil.copy(root / "csv" / "nodejs-hw1-ex1.csv", tmp_path / "csv" / "nodejs-hw1-ex1.csv")
        monkeypatch.chdir(tmp_path)

        runpy.run_path(str(root / "csv_to_text.py"), run_name="__main__")

        rows = _read_lines(tmp_path / "parsed.txt")
        assert len(rows) == 5
        assert rows[0] == {
            "Book": "The Compound Effect",
            "Author": "Darren Hardy",
            "Amount": "5",
            "Price": "9.48",
        }
