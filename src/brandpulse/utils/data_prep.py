"""Data preparation for export."""

import json
from typing import Dict, Any

from ..core.models import AnalysisRecord


def build_payload(url: str, source_type: str, record: AnalysisRecord) -> Dict[str, Any]:
    """Merge the record fields with the URL and source tag."""
    return {"url": url, "source_type": source_type, **record.to_dict()}


def to_json(payload: Dict[str, Any]) -> str:
    """Pretty-print a payload the way it is handed to downstream storage."""
    return json.dumps(payload, indent=2, ensure_ascii=False)


def export_to_json(data: Dict[str, Any], filename: str) -> None:
    """Export data to JSON file."""
    with open(filename, 'w', encoding='utf-8') as f:
        f.write(to_json(data))
        f.write("\n")
