"""
Output Formatting Module

Serializes generated records into text:
- JSON: compact array of records with nested objects preserved
- CSV: fixed flattened column set, comma-joined, unquoted

Unknown format labels fall back to JSON.
"""

import json
from typing import Any, Dict, List, Sequence
import logging

import pandas as pd

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("json", "csv")

# Flattened record path -> CSV header, in column order
CSV_COLUMNS: Dict[str, str] = {
    "id": "id",
    "username": "username",
    "email": "email",
    "profile.firstName": "firstName",
    "profile.lastName": "lastName",
    "profile.dateOfBirth": "dateOfBirth",
    "profile.phone": "phone",
    "address.street": "street",
    "address.city": "city",
    "address.state": "state",
    "address.country": "country",
    "address.zipCode": "zipCode",
}

MEDIA_TYPES = {
    "json": "application/json",
    "csv": "text/csv",
}


def normalize_format(fmt: str) -> str:
    """Lowercase a format label, mapping unknown labels to ``json``"""
    normalized = (fmt or "").strip().lower()

    if normalized not in SUPPORTED_FORMATS:
        logger.debug(f"Unknown output format '{fmt}', using json")
        return "json"

    return normalized


def media_type_for(fmt: str) -> str:
    return MEDIA_TYPES[normalize_format(fmt)]


def _payloads(records: Sequence[Any]) -> List[Dict[str, Any]]:
    return [record.to_dict() for record in records]


def to_json(records: Sequence[Any], pretty: bool = False) -> str:
    """
    Serialize records as a JSON array

    Args:
        records: Records exposing ``to_dict()``
        pretty: Indent by two spaces instead of the compact form

    Returns:
        JSON text (``[]`` for no records)
    """
    if pretty:
        return json.dumps(_payloads(records), indent=2, ensure_ascii=False)

    return json.dumps(_payloads(records), separators=(",", ":"), ensure_ascii=False)


def to_csv(records: Sequence[Any]) -> str:
    """
    Serialize records as comma-delimited text

    One header line followed by one line per record. Values are not quoted
    or escaped. No records yields an empty string, without a header.
    """
    if len(records) == 0:
        return ""

    frame = pd.json_normalize(_payloads(records))
    frame = frame[list(CSV_COLUMNS)].rename(columns=CSV_COLUMNS).astype(str)

    lines = [",".join(frame.columns)]
    lines.extend(",".join(row) for row in frame.itertuples(index=False, name=None))

    return "\n".join(lines)


def format_output(records: Sequence[Any], fmt: str = "json", pretty: bool = False) -> str:
    """
    Render records in the requested format

    Args:
        records: Ordered records
        fmt: Format label, case-insensitive (unknown labels give JSON)
        pretty: Indent JSON output

    Returns:
        Formatted text
    """
    if normalize_format(fmt) == "csv":
        return to_csv(records)

    return to_json(records, pretty=pretty)


class OutputFormatter:
    """Formatter bound to a format label"""

    def __init__(self, fmt: str = "json", pretty: bool = False):
        self.format = normalize_format(fmt)
        self.pretty = pretty

    @property
    def media_type(self) -> str:
        return MEDIA_TYPES[self.format]

    def format_records(self, records: Sequence[Any]) -> str:
        return format_output(records, self.format, pretty=self.pretty)
