"""Reporting helpers for decode results."""

from .json_output import save_json_results
from .markdown import format_decode_report

__all__ = ["format_decode_report", "save_json_results"]
