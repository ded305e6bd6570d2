"""Tests for the output writer."""

from decimal import Decimal
from pathlib import Path
from unittest.mock import patch

import pytest

from linefilter.classifier import Category
from linefilter.writer import OutputWriter, WriteResult


class TestOutputPath:
    """Tests for output file naming."""

    def test_default_names(self, tmp_path):
        """Test the three fixed basenames."""
        writer = OutputWriter(output_dir=tmp_path)
        assert writer.output_path(Category.INTEGER) == tmp_path / "integers.txt"
        assert writer.output_path(Category.DECIMAL) == tmp_path / "floats.txt"
        assert writer.output_path(Category.STRING) == tmp_path / "strings.txt"

    def test_prefix(self, tmp_path):
        """Test the prefix is prepended to the basename."""
        writer = OutputWriter(output_dir=tmp_path, prefix="sample-")
        assert writer.output_path(Category.STRING) == tmp_path / "sample-strings.txt"


class TestOutputWriter:
    """Tests for OutputWriter.write and write_all."""

    def test_empty_values_write_nothing(self, tmp_path):
        """Test empty categories create no file and no directory."""
        out = tmp_path / "out"
        writer = OutputWriter(output_dir=out)
        assert writer.write(Category.INTEGER, []) is None
        assert not out.exists()

    def test_creates_nested_directory(self, tmp_path):
        """Test missing parent directories are created."""
        out = tmp_path / "a" / "b" / "c"
        result = OutputWriter(output_dir=out).write(Category.INTEGER, [1, -2])

        assert result.success
        assert result.lines_written == 2
        assert (out / "integers.txt").read_text() == "1\n-2\n"

    def test_decimals_rendered_canonically(self, tmp_path):
        """Test decimals use their canonical text form."""
        values = [Decimal("1e10"), Decimal("-0.50"), Decimal("1E-7")]
        OutputWriter(output_dir=tmp_path).write(Category.DECIMAL, values)
        assert (tmp_path / "floats.txt").read_text() == "1E+10\n-0.50\n1E-7\n"

    def test_negative_zero_written_unsigned(self, tmp_path):
        """Test a negative zero decimal is written as plain zero."""
        OutputWriter(output_dir=tmp_path).write(Category.DECIMAL, [Decimal("-0.0"), Decimal("-1.0")])
        assert (tmp_path / "floats.txt").read_text() == "0.0\n-1.0\n"

    def test_strings_verbatim(self, tmp_path):
        """Test strings are written unchanged, blank ones included."""
        OutputWriter(output_dir=tmp_path).write(Category.STRING, ["  a b ", "", "x"])
        assert (tmp_path / "strings.txt").read_text() == "  a b \n\nx\n"

    def test_overwrite_truncates(self, tmp_path):
        """Test overwrite mode replaces existing content."""
        (tmp_path / "integers.txt").write_text("99\n")
        OutputWriter(output_dir=tmp_path).write(Category.INTEGER, [1])
        assert (tmp_path / "integers.txt").read_text() == "1\n"

    def test_append_keeps_existing(self, tmp_path):
        """Test append mode adds after existing content."""
        (tmp_path / "integers.txt").write_text("99\n")
        OutputWriter(output_dir=tmp_path, append=True).write(Category.INTEGER, [1])
        assert (tmp_path / "integers.txt").read_text() == "99\n1\n"

    def test_directory_creation_failure(self, tmp_path, caplog):
        """Test a directory that cannot be created skips the category."""
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")
        out = blocker / "sub"

        result = OutputWriter(output_dir=out).write(Category.INTEGER, [1])

        assert isinstance(result, WriteResult)
        assert not result.success
        assert "Failed to create directory" in result.error_message
        assert "Failed to create directory" in caplog.text

    def test_write_failure_reported(self, tmp_path, caplog):
        """Test an error while writing is reported, not raised."""
        writer = OutputWriter(output_dir=tmp_path)
        with patch("builtins.open", side_effect=PermissionError("denied")):
            result = writer.write(Category.STRING, ["x"])

        assert not result.success
        assert result.error_message == "denied"
        assert "Error writing to file" in caplog.text

    def test_write_all_continues_after_failure(self, tmp_path):
        """Test one failing category does not stop the others."""
        writer = OutputWriter(output_dir=tmp_path)
        (tmp_path / "floats.txt").mkdir()

        results = writer.write_all([1], [Decimal("1.5")], ["s"])

        assert [r.category for r in results] == [
            Category.INTEGER,
            Category.DECIMAL,
            Category.STRING,
        ]
        assert [r.success for r in results] == [True, False, True]
        assert (tmp_path / "strings.txt").read_text() == "s\n"

    def test_write_all_skips_empty(self, tmp_path):
        """Test write_all only reports non-empty categories."""
        results = OutputWriter(output_dir=tmp_path).write_all([], [], ["s"])
        assert len(results) == 1
        assert not (tmp_path / "integers.txt").exists()
