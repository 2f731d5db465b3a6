"""Helpers for formatting API responses for display"""

import json
from typing import Any


def format_json(data: Any) -> str:
    """Pretty-print JSON, parsing text first. Unparseable input comes back unchanged."""
    try:
        if isinstance(data, str):
            data = json.loads(data)
        return json.dumps(data, indent=2, ensure_ascii=False)
    except (ValueError, TypeError):
        return str(data)


def format_simple_response(value: Any) -> str:
    """Format a single-value response such as a validation result"""
    if not isinstance(value, str):
        return str(value)

    try:
        parsed = json.loads(value)
    except ValueError:
        return value

    if isinstance(parsed, (dict, list)):
        return format_json(parsed)
    if isinstance(parsed, str):
        return parsed
    return json.dumps(parsed)
