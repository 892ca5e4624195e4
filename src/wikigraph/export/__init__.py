"""Graph exporters for wikigraph."""

from .data import DataExporter, to_json
from .dot import DotExporter, to_dot

__all__ = [
    "DataExporter",
    "DotExporter",
    "to_dot",
    "to_json",
]
