"""Unit tests for baseline storage."""

import json

import pytest

from semantic_guard.statistics import summarize
from semantic_guard.storage import BaselineStore
from semantic_guard.utils import BaselineException


@pytest.mark.unit
class TestBaselineStore:
    """Test suite for BaselineStore."""

    def test_bootstrap_when_missing(self, tmp_path, baseline_values):
        """Test first run writes a baseline from the current data."""
        store = BaselineStore(tmp_path / "baseline", sample_size=5)
        stats = summarize(baseline_values)

        record = store.load_or_create("prices.csv", stats, baseline_values)

        assert record.is_new is True
        assert record.stats == stats
        assert record.sample_data == baseline_values[:5]
        assert record.path == tmp_path / "baseline" / "prices.csv"

        with open(record.path, "r", encoding="utf-8") as f:
            document = json.load(f)
        assert set(document) == {"created_at", "baseline_stats", "sample_data"}
        assert document["baseline_stats"] == stats.to_dict()
        assert document["sample_data"] == baseline_values[:5]

    def test_load_existing(self, tmp_path, baseline_values):
        """Test an existing baseline is loaded rather than replaced."""
        store = BaselineStore(tmp_path)
        recorded = summarize(baseline_values)
        store.save("prices.csv", recorded, baseline_values)

        record = store.load_or_create("prices.csv", summarize([1, 2, 3]), [1, 2, 3])

        assert record.is_new is False
        assert record.stats == recorded
        assert record.sample_data == baseline_values[:10]

    def test_corrupt_baseline_is_replaced(self, tmp_path, baseline_values):
        """Test an unreadable baseline is bootstrapped again."""
        path = tmp_path / "prices.csv"
        path.write_text("{broken", encoding="utf-8")
        store = BaselineStore(tmp_path)

        record = store.load_or_create("prices.csv", summarize(baseline_values), baseline_values)

        assert record.is_new is True
        assert store.load("prices.csv").stats == summarize(baseline_values)

    def test_load_rejects_incomplete_stats(self, tmp_path):
        """Test schema validation of baseline files."""
        path = tmp_path / "prices.csv"
        path.write_text(
            json.dumps({"created_at": "2024-01-01T00:00:00", "baseline_stats": {"mean": 1}}),
            encoding="utf-8",
        )

        with pytest.raises(BaselineException) as exc_info:
            BaselineStore(tmp_path).load("prices.csv")

        assert exc_info.value.error_code == "G005"

    def test_load_accepts_documents_without_sample(self, tmp_path):
        """Test baselines recorded without sample data."""
        stats = summarize([1, 2, 3, 4])
        document = {"created_at": "2024-01-01T00:00:00", "baseline_stats": stats.to_dict()}
        (tmp_path / "prices.json").write_text(json.dumps(document), encoding="utf-8")

        record = BaselineStore(tmp_path).load("prices.json")

        assert record.stats == stats
        assert record.sample_data == []

    def test_creates_nested_directory(self, tmp_path):
        """Test the baseline directory is created on demand."""
        store = BaselineStore(tmp_path / "data" / "baseline")

        record = store.save("prices.csv", summarize([1.0]), [1.0])

        assert record.path.exists()
