"""Exporters for converting metadata indexes to various output formats."""

from .ascii_exporter import to_ascii
from .json_exporter import to_json
from .yaml_exporter import to_yaml

__all__ = ["to_ascii", "to_json", "to_yaml"]
