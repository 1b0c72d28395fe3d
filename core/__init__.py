"""ETS group address CSV export core."""

from .csv_rows import build_ets_csv, escape_csv_value
from .exporter import EtsCsvExport, export_ets_csv, suggest_filename
from .group_address import GroupAddress, parse_group_address
from .overview import AddressEntry, HierarchicalOverview, MainGroupNode, MiddleGroupNode
from .sanitizer import capitalize_first, sanitize_name
from .windows1252 import encode_windows_1252

__all__ = [
    "AddressEntry",
    "EtsCsvExport",
    "GroupAddress",
    "HierarchicalOverview",
    "MainGroupNode",
    "MiddleGroupNode",
    "build_ets_csv",
    "capitalize_first",
    "encode_windows_1252",
    "escape_csv_value",
    "export_ets_csv",
    "parse_group_address",
    "sanitize_name",
    "suggest_filename",
]
