"""Utility modules for BrandPulse."""

from .data_prep import build_payload, export_to_json
from .display import display_results, format_report

__all__ = [
    "build_payload",
    "export_to_json",
    "display_results",
    "format_report",
]
