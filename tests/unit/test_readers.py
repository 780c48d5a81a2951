"""Unit tests for CSV and JSON readers."""

import pytest

from semantic_guard.ingestion import load_values, parse_csv, parse_json
from semantic_guard.utils import (
    ColumnNotFoundException,
    DataParsingException,
    UnsupportedFileTypeException
)


@pytest.mark.unit
class TestParseCSV:
    """Test suite for parse_csv."""

    def test_numeric_column(self, tmp_path):
        """Test non-numeric cells are dropped."""
        path = tmp_path / "prices.csv"
        path.write_text("id,value\n1,10.5\n2,abc\n3,20\n4,\n", encoding="utf-8")

        assert parse_csv(path, "value") == [10.5, 20.0]

    def test_header_whitespace(self, tmp_path):
        """Test headers and cells with surrounding spaces."""
        path = tmp_path / "prices.csv"
        path.write_text("id, value\n1, 3\n2, 4.5\n", encoding="utf-8")

        assert parse_csv(path, "value") == [3.0, 4.5]

    def test_custom_column(self, tmp_path, write_csv):
        """Test reading a non-default column."""
        path = write_csv(tmp_path / "t.csv", [21.5, 22.0], column="temperature")

        assert parse_csv(path, "temperature") == [21.5, 22.0]

    def test_missing_column(self, tmp_path):
        """Test error listing the available columns."""
        path = tmp_path / "prices.csv"
        path.write_text("id,amount\n1,10\n", encoding="utf-8")

        with pytest.raises(ColumnNotFoundException) as exc_info:
            parse_csv(path, "value")

        assert 'Column "value" not found' in exc_info.value.message
        assert "Available: id, amount" in exc_info.value.message

    @pytest.mark.parametrize("content", ["id,value\n", ""])
    def test_no_data_rows(self, tmp_path, content):
        """Test files without data rows are rejected."""
        path = tmp_path / "prices.csv"
        path.write_text(content, encoding="utf-8")

        with pytest.raises(DataParsingException):
            parse_csv(path, "value")

    def test_non_finite_values_dropped(self, tmp_path):
        """Test infinities never reach the summarizer."""
        path = tmp_path / "prices.csv"
        path.write_text("value\n1\ninf\n-inf\n2\n", encoding="utf-8")

        assert parse_csv(path, "value") == [1.0, 2.0]

    def test_row_with_extra_fields(self, tmp_path):
        """Test a row with trailing extra cells keeps its value."""
        path = tmp_path / "prices.csv"
        path.write_text("id,value\n1,10\n2,11,extra\n3,12\n", encoding="utf-8")

        assert parse_csv(path, "value") == [10.0, 11.0, 12.0]


@pytest.mark.unit
class TestParseJSON:
    """Test suite for parse_json."""

    def test_array_of_objects(self, tmp_path, write_json):
        """Test values read from each object."""
        path = write_json(
            tmp_path / "prices.json",
            [{"value": 1}, {"value": "2.5"}, {"value": None}, {"other": 3}, "x"],
        )

        assert parse_json(path, "value") == [1.0, 2.5]

    def test_booleans_dropped_from_objects(self, tmp_path, write_json):
        """Test boolean values in records are not counted as numbers."""
        path = write_json(
            tmp_path / "prices.json",
            [{"value": 1}, {"value": True}, {"value": False}],
        )

        assert parse_json(path, "value") == [1.0]

    def test_booleans_dropped_from_array_property(self, tmp_path, write_json):
        """Test boolean entries in a value array are dropped."""
        path = write_json(tmp_path / "prices.json", {"value": [1, "2", True, 4]})

        assert parse_json(path, "value") == [1.0, 2.0, 4.0]

    def test_only_booleans_rejected(self, tmp_path, write_json):
        """Test records holding only booleans have no numeric values."""
        path = write_json(tmp_path / "prices.json", [{"value": True}])

        with pytest.raises(DataParsingException):
            parse_json(path, "value")

    def test_array_without_numbers(self, tmp_path, write_json):
        """Test an array with no numeric values is rejected."""
        path = write_json(tmp_path / "prices.json", [{"value": "n/a"}, {"other": 1}])

        with pytest.raises(DataParsingException) as exc_info:
            parse_json(path, "value")

        assert 'No numeric values found in column "value"' in exc_info.value.message

    def test_object_with_array_property(self, tmp_path, write_json):
        """Test an object holding the values as an array."""
        path = write_json(tmp_path / "prices.json", {"value": [1, "x", 3], "unit": "USD"})

        assert parse_json(path, "value") == [1.0, 3.0]

    @pytest.mark.parametrize("document", [42, {"value": 3}, {"other": [1, 2]}])
    def test_unsupported_shape(self, tmp_path, write_json, document):
        """Test documents that are neither shape are rejected."""
        path = write_json(tmp_path / "prices.json", document)

        with pytest.raises(DataParsingException):
            parse_json(path, "value")

    def test_malformed_json(self, tmp_path):
        """Test invalid JSON is reported as a parsing error."""
        path = tmp_path / "prices.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(DataParsingException):
            parse_json(path, "value")


@pytest.mark.unit
class TestLoadValues:
    """Test suite for load_values."""

    def test_dispatch_csv(self, tmp_path, write_csv):
        """Test CSV dispatch, case-insensitive."""
        path = write_csv(tmp_path / "prices.csv", [1, 2, 3])

        assert load_values(path, "CSV", "value") == [1.0, 2.0, 3.0]

    def test_dispatch_json(self, tmp_path, write_json):
        """Test JSON dispatch."""
        path = write_json(tmp_path / "prices.json", [{"value": 4}])

        assert load_values(path, "json", "value") == [4.0]

    def test_missing_file(self, tmp_path):
        """Test a missing file is a parsing error."""
        with pytest.raises(DataParsingException) as exc_info:
            load_values(tmp_path / "missing.csv", "csv", "value")

        assert "File not found" in exc_info.value.message

    def test_parquet_not_supported(self, tmp_path):
        """Test parquet is rejected with a hint."""
        path = tmp_path / "prices.parquet"
        path.write_bytes(b"PAR1")

        with pytest.raises(UnsupportedFileTypeException) as exc_info:
            load_values(path, "parquet", "value")

        assert "Use CSV or JSON" in exc_info.value.message
        assert exc_info.value.error_code == "G004"

    def test_unknown_type(self, tmp_path):
        """Test unknown file types are rejected."""
        path = tmp_path / "prices.xml"
        path.write_text("<values/>", encoding="utf-8")

        with pytest.raises(UnsupportedFileTypeException):
            load_values(path, "xml", "value")
