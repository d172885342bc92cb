"""Export availability results to JSON, JSONL or CSV files."""

import csv
import json
from datetime import UTC, datetime
from pathlib import Path

from namesmith.results import DomainCheckResult

FIELD_DOMAIN = "domain"
FIELD_AVAILABLE = "available"
FIELD_PREMIUM = "premium"
FIELD_PRICE = "price"
FIELD_ERROR = "error"
FIELD_SOURCE = "source"
FIELD_TIMESTAMP = "timestamp"
EXPORT_FIELDS = (
    FIELD_DOMAIN,
    FIELD_AVAILABLE,
    FIELD_PREMIUM,
    FIELD_PRICE,
    FIELD_ERROR,
    FIELD_SOURCE,
    FIELD_TIMESTAMP,
)


def export_results(results: list[DomainCheckResult], output_path: str) -> None:
    """Export results to a file. Format is auto-detected from extension.

    Args:
        results: List of DomainCheckResult objects.
        output_path: Path to output file (.json, .jsonl, or .csv).

    Raises:
        ValueError: If the file extension is not .json, .jsonl, or .csv.
    """
    path = Path(output_path)
    ext = path.suffix.lower()

    if ext == ".json":
        _export_json(results, path)
    elif ext == ".jsonl":
        _export_jsonl(results, path)
    elif ext == ".csv":
        _export_csv(results, path)
    else:
        raise ValueError(f"Unsupported file format '{ext}'. Use .json, .jsonl, or .csv.")


def _build_row(result: DomainCheckResult, timestamp: str) -> dict:
    return {
        FIELD_DOMAIN: result.domain,
        FIELD_AVAILABLE: result.available,
        FIELD_PREMIUM: result.premium,
        FIELD_PRICE: result.price,
        FIELD_ERROR: result.error_message,
        FIELD_SOURCE: result.source,
        FIELD_TIMESTAMP: timestamp,
    }


def _rows(results: list[DomainCheckResult]) -> list[dict]:
    # single timestamp for the whole export
    timestamp = datetime.now(UTC).isoformat()
    return [_build_row(r, timestamp) for r in results]


def _export_json(results: list[DomainCheckResult], path: Path) -> None:
    path.write_text(json.dumps(_rows(results), indent=2) + "\n")


def _export_jsonl(results: list[DomainCheckResult], path: Path) -> None:
    lines = [json.dumps(row) for row in _rows(results)]
    path.write_text("\n".join(lines) + "\n")


def _export_csv(results: list[DomainCheckResult], path: Path) -> None:
    with path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=list(EXPORT_FIELDS))
        writer.writeheader()
        for row in _rows(results):
            writer.writerow(row)
