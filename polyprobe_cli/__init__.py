"""
polyprobe CLI - Command-line interface for region catalogs.

Usage:
    polyprobe contains config/regions.yaml 2.0 2.0
    polyprobe list-regions config/regions.yaml
    polyprobe wkt config/regions.yaml depot
"""

__version__ = "1.0.0"
