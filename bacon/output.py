"""
Output module for bacon.

Every command prints its result in one of two formats:
- YAML (default): block style, keys in API order
- JSON (-o): indented by 2

Usage:
    from bacon.output import print_result

    print_result(json_output, client.get_specific("8"))
"""

import json
import sys
from typing import Any

import yaml


def to_data(obj: Any) -> Any:
    """Convert DTOs, collections and mappings into plain JSON-able data."""
    if obj is None or isinstance(obj, (str, int, float, bool)):
        return obj
    if hasattr(obj, 'to_dict'):
        return obj.to_dict()
    if isinstance(obj, dict):
        return {key: to_data(value) for key, value in obj.items()}
    # RemoteCollection, generators, lists
    return [to_data(item) for item in obj]


def format_json(data: Any) -> str:
    """Format data as a single indented JSON document."""
    return json.dumps(data, ensure_ascii=False, indent=2)


def format_yaml(data: Any) -> str:
    """Format data as YAML."""
    return yaml.safe_dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False)


def print_result(json_output: bool, obj: Any, stream=None) -> None:
    """
    Print a command result.

    Args:
        json_output: If True, print JSON, otherwise YAML
        obj: DTO, iterable of DTOs, or plain data; None prints nothing
        stream: Output stream (defaults to stdout)
    """
    if obj is None:
        return

    stream = stream or sys.stdout
    data = to_data(obj)

    if json_output:
        print(format_json(data), file=stream, flush=True)
    else:
        print(format_yaml(data), end='', file=stream, flush=True)
