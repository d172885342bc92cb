"""Tests for exporting results to JSON, JSONL and CSV."""

import csv
import json

import pytest

from namesmith.exporter import EXPORT_FIELDS, export_results
from namesmith.results import DomainCheckResult


@pytest.fixture
def sample_results():
    return [
        DomainCheckResult("petly.com", available=False),
        DomainCheckResult("petly.io", available=True, premium=True, price=120.5),
        DomainCheckResult("petly.dev", available=False, error_message="Timed out after 5s"),
        DomainCheckResult("petsitter.io", available=True, source="mock"),
    ]


class TestExportJSON:
    def test_export_json_valid_json(self, tmp_path, sample_results):
        out = tmp_path / "results.json"
        export_results(sample_results, str(out))
        data = json.loads(out.read_text())
        assert isinstance(data, list)
        assert len(data) == 4

    def test_export_json_fields(self, tmp_path, sample_results):
        out = tmp_path / "results.json"
        export_results(sample_results, str(out))
        for row in json.loads(out.read_text()):
            assert set(row) == set(EXPORT_FIELDS)

    def test_export_json_values(self, tmp_path, sample_results):
        out = tmp_path / "results.json"
        export_results(sample_results, str(out))
        rows = {row["domain"]: row for row in json.loads(out.read_text())}
        assert rows["petly.io"]["premium"] is True
        assert rows["petly.io"]["price"] == 120.5
        assert rows["petly.com"]["price"] is None
        assert rows["petly.dev"]["error"] == "Timed out after 5s"
        assert rows["petsitter.io"]["source"] == "mock"

    def test_export_json_preserves_order(self, tmp_path, sample_results):
        out = tmp_path / "results.json"
        export_results(sample_results, str(out))
        domains = [row["domain"] for row in json.loads(out.read_text())]
        assert domains == [r.domain for r in sample_results]

    def test_export_json_single_timestamp(self, tmp_path, sample_results):
        out = tmp_path / "results.json"
        export_results(sample_results, str(out))
        timestamps = {row["timestamp"] for row in json.loads(out.read_text())}
        assert len(timestamps) == 1

    def test_export_empty_results(self, tmp_path):
        out = tmp_path / "results.json"
        export_results([], str(out))
        assert json.loads(out.read_text()) == []


class TestExportJSONL:
    def test_export_jsonl_one_object_per_line(self, tmp_path, sample_results):
        out = tmp_path / "results.jsonl"
        export_results(sample_results, str(out))
        lines = out.read_text().strip().splitlines()
        assert len(lines) == 4
        assert json.loads(lines[1])["domain"] == "petly.io"


class TestExportCSV:
    def test_export_csv_header_and_rows(self, tmp_path, sample_results):
        out = tmp_path / "results.csv"
        export_results(sample_results, str(out))
        with out.open() as f:
            reader = csv.DictReader(f)
            rows = list(reader)
        assert reader.fieldnames == list(EXPORT_FIELDS)
        assert len(rows) == 4
        assert rows[1]["domain"] == "petly.io"
        assert rows[1]["available"] == "True"
        assert rows[1]["price"] == "120.5"
        assert rows[0]["price"] == ""

    def test_export_csv_uppercase_extension(self, tmp_path, sample_results):
        out = tmp_path / "RESULTS.CSV"
        export_results(sample_results, str(out))
        assert out.read_text().startswith("domain,")


def test_unsupported_extension(tmp_path, sample_results):
    with pytest.raises(ValueError, match="Unsupported file format"):
        export_results(sample_results, str(tmp_path / "results.xml"))
