"""
Configuration schema for the region catalog.

Regions are named polygons loaded from YAML. Validation happens in
``__post_init__`` and fails fast with ValueError; the geometry kernel
itself never validates its input.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple, Union
import yaml


def _is_number(value) -> bool:
    # YAML true/false load as bool, a subclass of int
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class RegionConfig:
    """Named polygon region."""

    region_id: str
    coordinates: List[Tuple[float, float]]
    enabled: bool = True
    description: Optional[str] = None

    def __post_init__(self):
        """Validate region configuration."""
        if not self.region_id:
            raise ValueError("region_id cannot be empty")

        if len(self.coordinates) < 3:
            raise ValueError(
                f"Region '{self.region_id}' must have at least 3 points, "
                f"got {len(self.coordinates)}"
            )

        for coord in self.coordinates:
            if len(coord) != 2 or not all(_is_number(value) for value in coord):
                raise ValueError(
                    f"Region '{self.region_id}' has invalid coordinate {coord!r}, "
                    f"expected [x, y]"
                )

        if not isinstance(self.enabled, bool):
            raise ValueError(
                f"Region '{self.region_id}' enabled must be true or false, "
                f"got {self.enabled!r}"
            )


@dataclass(frozen=True)
class LoggingConfig:
    """Structured logging settings."""

    level: str = "INFO"
    component: str = "regions"

    def __post_init__(self):
        """Validate logging configuration."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR"}
        if not isinstance(self.level, str) or self.level.upper() not in valid_levels:
            raise ValueError(
                f"Invalid logging level: {self.level}. "
                f"Must be one of {sorted(valid_levels)}"
            )
        if not self.component:
            raise ValueError("logging component cannot be empty")

    @property
    def level_number(self) -> int:
        """Numeric level for the logging module."""
        return getattr(logging, self.level.upper())


@dataclass(frozen=True)
class CatalogConfig:
    """
    Main configuration for a region catalog.

    Immutable after construction (frozen dataclass).
    """

    regions: List[RegionConfig] = field(default_factory=list)
    logging_config: LoggingConfig = field(default_factory=LoggingConfig)

    def __post_init__(self):
        """Validate catalog configuration."""
        seen = set()
        for region in self.regions:
            if region.region_id in seen:
                raise ValueError(f"Duplicate region_id: '{region.region_id}'")
            seen.add(region.region_id)

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "CatalogConfig":
        """
        Build configuration from a parsed YAML mapping.

        Raises:
            ValueError: If required keys are missing or values invalid
        """
        data = data or {}
        if not isinstance(data, dict):
            raise ValueError(f"Catalog config must be a mapping, got {type(data).__name__}")

        try:
            logging_config = LoggingConfig(**(data.get("logging") or {}))
        except TypeError as e:
            raise ValueError(f"Invalid logging config: {e}") from e

        regions = []
        for r in data.get("regions") or []:
            try:
                regions.append(
                    RegionConfig(
                        region_id=r["region_id"],
                        coordinates=[tuple(coord) for coord in r["coordinates"]],
                        enabled=r.get("enabled", True),
                        description=r.get("description"),
                    )
                )
            except KeyError as e:
                raise ValueError(f"Missing required region field: {e}") from e
            except TypeError as e:
                raise ValueError(f"Invalid region data: {e}") from e

        return cls(regions=regions, logging_config=logging_config)

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> "CatalogConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            logging:
              level: INFO
              component: regions

            regions:
              - region_id: "depot"
                description: "Loading depot"
                coordinates: [[0, 0], [4, 0], [4, 4], [0, 4]]
                enabled: true

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If YAML is malformed or the config invalid
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {yaml_path}: {e}") from e

        return cls.from_dict(data)
