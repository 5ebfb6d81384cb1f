"""
Region Catalog
==============

Bounded Context: Named polygons queried by point.

Architecture:

    polyprobe_regions/
    ├── config.py      # CatalogConfig, RegionConfig, LoggingConfig (YAML)
    ├── catalog.py     # RegionCatalog (thread-safe registry)
    └── logging/       # StructuredLogger, LogEvent

Usage:

    from polyprobe_geometry import Point
    from polyprobe_regions import CatalogConfig, RegionCatalog

    config = CatalogConfig.from_yaml("regions.yaml")
    catalog = RegionCatalog.from_config(config)
    catalog.regions_containing(Point(2, 2))
"""

from polyprobe_regions.config import CatalogConfig, RegionConfig, LoggingConfig
from polyprobe_regions.catalog import RegionCatalog, RegionNotFoundError, ManagedRegion

__all__ = [
    "CatalogConfig",
    "RegionConfig",
    "LoggingConfig",
    "RegionCatalog",
    "RegionNotFoundError",
    "ManagedRegion",
]
