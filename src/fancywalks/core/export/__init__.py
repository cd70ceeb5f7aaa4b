"""
Export of walk records.
"""

from .csv_export import export_walks_csv, read_walks_csv

__all__ = [
    "export_walks_csv",
    "read_walks_csv",
]
