"""
fancywalks - walking-route extraction from KMZ map files.

This package reads a KMZ map of walks, decodes each placemark into a walk
record with its length and distance from home, and exports the records to CSV.
"""

__version__ = "0.1.0"
