"""
Region Catalog - Thread-safe registry of named polygons.

Answers "which regions contain this point" over a set of polygons that can
be added, removed, enabled and disabled at runtime.

Thread Safety:
- threading.Lock protects region dict mutations
- Snapshot pattern for queries: polygons are immutable, so containment
  tests run outside the lock
"""

import threading
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from polyprobe_geometry import Point, Polygon
from polyprobe_regions.config import CatalogConfig
from polyprobe_regions.logging import LogEvent, StructuredLogger, create_logger


class RegionNotFoundError(KeyError):
    """Raised when a region id is not registered in the catalog."""
    pass


@dataclass
class ManagedRegion:
    """Polygon plus catalog bookkeeping."""

    region_id: str
    polygon: Polygon
    enabled: bool = True
    description: Optional[str] = None

    def info(self) -> Dict[str, Any]:
        return {
            "region_id": self.region_id,
            "vertex_count": len(self.polygon),
            "enabled": self.enabled,
            "description": self.description,
        }


class RegionCatalog:
    """
    Thread-safe catalog of named polygon regions.

    Thread Safety Guarantees:
    - add_region(), remove_region(): Write operations (acquire lock)
    - enable_region(), disable_region(): Write operations (acquire lock)
    - regions_containing(): Snapshot under lock, evaluation outside it
    - list_regions(), get_region(): Read operations (acquire lock briefly)

    Usage:
        catalog = RegionCatalog()
        catalog.add_region("depot", Polygon([(0, 0), (4, 0), (4, 4), (0, 4)]))
        catalog.regions_containing(Point(2, 2))   # ["depot"]
    """

    def __init__(self, logger: Optional[StructuredLogger] = None):
        self._regions: Dict[str, ManagedRegion] = {}
        self._lock = threading.Lock()
        self._logger = logger or create_logger("catalog")

    @classmethod
    def from_config(
        cls,
        config: CatalogConfig,
        logger: Optional[StructuredLogger] = None
    ) -> "RegionCatalog":
        """
        Build a catalog from validated configuration.

        Disabled regions are registered but excluded from queries.
        """
        if logger is None:
            logger = create_logger(
                config.logging_config.component,
                level=config.logging_config.level_number,
            )

        catalog = cls(logger=logger)
        for region in config.regions:
            catalog.add_region(
                region.region_id,
                Polygon(region.coordinates),
                description=region.description,
                enabled=region.enabled,
            )

        logger.info(
            event=LogEvent.CONFIG_LOADED,
            message=f"Loaded {len(config.regions)} regions",
            metadata={"region_count": len(config.regions)},
        )
        return catalog

    def add_region(
        self,
        region_id: str,
        polygon: Polygon,
        description: Optional[str] = None,
        enabled: bool = True
    ) -> None:
        """
        Register a polygon under ``region_id``.

        Raises:
            ValueError: If region_id already exists
        """
        managed = ManagedRegion(
            region_id=region_id,
            polygon=polygon,
            enabled=enabled,
            description=description,
        )

        with self._lock:
            if region_id in self._regions:
                raise ValueError(f"Region '{region_id}' already exists")
            self._regions[region_id] = managed

        self._logger.info(
            event=LogEvent.REGION_ADDED,
            message=f"Region '{region_id}' added",
            metadata={"region_id": region_id, "vertex_count": len(polygon), "enabled": enabled},
        )

    def remove_region(self, region_id: str) -> None:
        """
        Remove a region.

        Raises:
            RegionNotFoundError: If region_id is not registered
        """
        with self._lock:
            self._require(region_id)
            del self._regions[region_id]

        self._logger.info(
            event=LogEvent.REGION_REMOVED,
            message=f"Region '{region_id}' removed",
            metadata={"region_id": region_id},
        )

    def enable_region(self, region_id: str) -> None:
        """Include a region in queries."""
        self._set_enabled(region_id, True)

    def disable_region(self, region_id: str) -> None:
        """Exclude a region from queries without removing it."""
        self._set_enabled(region_id, False)

    def get_region(self, region_id: str) -> Polygon:
        """
        Polygon registered under ``region_id``.

        Raises:
            RegionNotFoundError: If region_id is not registered
        """
        with self._lock:
            return self._require(region_id).polygon

    def list_regions(self) -> List[Dict[str, Any]]:
        """Info dicts for all regions, in insertion order."""
        with self._lock:
            return [managed.info() for managed in self._regions.values()]

    def regions_containing(self, point: Point) -> List[str]:
        """
        Ids of enabled regions containing ``point`` (boundary included).

        Args:
            point: Query point (Point or (x, y))

        Returns:
            Region ids in insertion order
        """
        with self._lock:
            snapshot = [
                (managed.region_id, managed.polygon)
                for managed in self._regions.values()
                if managed.enabled
            ]

        matches = [region_id for region_id, polygon in snapshot if polygon.contains(point)]

        self._logger.debug(
            event=LogEvent.REGION_QUERY,
            message=f"{len(matches)} of {len(snapshot)} regions contain point",
            metadata={"point": str(point), "matches": matches},
        )
        return matches

    def __contains__(self, region_id: str) -> bool:
        with self._lock:
            return region_id in self._regions

    def __len__(self) -> int:
        with self._lock:
            return len(self._regions)

    def _set_enabled(self, region_id: str, enabled: bool) -> None:
        with self._lock:
            self._require(region_id).enabled = enabled

        self._logger.info(
            event=LogEvent.REGION_ENABLED if enabled else LogEvent.REGION_DISABLED,
            message=f"Region '{region_id}' {'enabled' if enabled else 'disabled'}",
            metadata={"region_id": region_id},
        )

    def _require(self, region_id: str) -> ManagedRegion:
        # caller holds the lock
        managed = self._regions.get(region_id)
        if managed is None:
            self._logger.warning(
                event=LogEvent.REGION_NOT_FOUND,
                message=f"Region '{region_id}' not found",
                metadata={"region_id": region_id, "available": list(self._regions)},
            )
            raise RegionNotFoundError(region_id)
        return managed
