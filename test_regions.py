"""
Region Catalog Tests - config, catalog, CLI
===========================================

Usage:
    pytest test_regions.py
"""

import json
import logging
import textwrap

import pytest

from polyprobe_cli.cli import main
from polyprobe_geometry import Point, Polygon
from polyprobe_regions import (
    CatalogConfig,
    LoggingConfig,
    RegionCatalog,
    RegionConfig,
    RegionNotFoundError,
)
from polyprobe_regions.logging import LogEvent, create_logger


CATALOG_YAML = textwrap.dedent("""
    logging:
      level: INFO
      component: test_regions

    regions:
      - region_id: depot
        description: Loading depot
        coordinates: [[0, 0], [4, 0], [4, 4], [0, 4]]
      - region_id: yard
        coordinates: [[2, 2], [6, 2], [6, 6], [2, 6]]
      - region_id: closed
        coordinates: [[0, 0], [10, 0], [10, 10]]
        enabled: false
""")


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "regions.yaml"
    path.write_text(CATALOG_YAML)
    return path


@pytest.fixture
def catalog():
    catalog = RegionCatalog(logger=create_logger("test_catalog"))
    catalog.add_region("depot", Polygon([(0, 0), (4, 0), (4, 4), (0, 4)]), description="Loading depot")
    catalog.add_region("yard", Polygon([(2, 2), (6, 2), (6, 6), (2, 6)]))
    return catalog


# ========== Config ==========

def test_config_from_yaml(config_path):
    config = CatalogConfig.from_yaml(config_path)

    assert [r.region_id for r in config.regions] == ["depot", "yard", "closed"]
    assert config.regions[0].coordinates == [(0, 0), (4, 0), (4, 4), (0, 4)]
    assert config.regions[0].description == "Loading depot"
    assert config.regions[2].enabled is False
    assert config.logging_config == LoggingConfig(level="INFO", component="test_regions")
    assert config.logging_config.level_number == logging.INFO


def test_config_defaults():
    config = CatalogConfig.from_dict(None)
    assert config.regions == []
    assert config.logging_config == LoggingConfig()


def test_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        CatalogConfig.from_yaml(tmp_path / "missing.yaml")


def test_config_malformed_yaml(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("regions: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid YAML"):
        CatalogConfig.from_yaml(path)


@pytest.mark.parametrize("data, message", [
    ({"regions": [{"region_id": "a", "coordinates": [[0, 0], [1, 1]]}]}, "at least 3 points"),
    ({"regions": [{"region_id": "", "coordinates": [[0, 0], [1, 0], [1, 1]]}]}, "cannot be empty"),
    ({"regions": [{"coordinates": [[0, 0], [1, 0], [1, 1]]}]}, "Missing required region field"),
    ({"regions": [{"region_id": "a", "coordinates": [[0, 0, 0], [1, 0], [1, 1]]}]}, "invalid coordinate"),
    ({"regions": [{"region_id": "a", "coordinates": [0, 1, 2]}]}, "Invalid region data"),
    ({"regions": [{"region_id": "a", "coordinates": [[None, 0], [1, 0], [1, 1]]}]}, "invalid coordinate"),
    ({"regions": [{"region_id": "a", "coordinates": [["a", 0], [1, 0], [1, 1]]}]}, "invalid coordinate"),
    ({"regions": [{"region_id": "a", "coordinates": [[True, 0], [1, 0], [1, 1]]}]}, "invalid coordinate"),
    ({"regions": [{"region_id": "a", "coordinates": [[0, 0], [1, 0], [1, 1]], "enabled": "false"}]},
     "enabled must be true or false"),
    ({"logging": {"level": "LOUD"}}, "Invalid logging level"),
    ({"logging": {"level": 10}}, "Invalid logging level"),
    ({"logging": {"colour": "red"}}, "Invalid logging config"),
    ([1, 2, 3], "must be a mapping"),
])
def test_config_validation(data, message):
    with pytest.raises(ValueError, match=message):
        CatalogConfig.from_dict(data)


def test_config_rejects_duplicate_ids():
    region = RegionConfig(region_id="a", coordinates=[(0, 0), (1, 0), (1, 1)])
    with pytest.raises(ValueError, match="Duplicate region_id"):
        CatalogConfig(regions=[region, region])


# ========== Catalog ==========

def test_regions_containing(catalog):
    assert catalog.regions_containing(Point(1, 1)) == ["depot"]
    assert catalog.regions_containing(Point(3, 3)) == ["depot", "yard"]
    assert catalog.regions_containing(Point(4, 4)) == ["depot", "yard"]
    assert catalog.regions_containing(Point(9, 9)) == []


def test_disabled_regions_are_skipped(catalog):
    catalog.disable_region("depot")
    assert catalog.regions_containing(Point(3, 3)) == ["yard"]

    catalog.enable_region("depot")
    assert catalog.regions_containing(Point(3, 3)) == ["depot", "yard"]


def test_add_duplicate_region(catalog):
    with pytest.raises(ValueError, match="already exists"):
        catalog.add_region("depot", Polygon([(0, 0), (1, 0), (1, 1)]))


def test_remove_and_lookup_region(catalog):
    assert "yard" in catalog
    assert catalog.get_region("yard") == Polygon([(2, 2), (6, 2), (6, 6), (2, 6)])

    catalog.remove_region("yard")
    assert "yard" not in catalog
    assert len(catalog) == 1

    with pytest.raises(RegionNotFoundError):
        catalog.get_region("yard")
    with pytest.raises(KeyError):
        catalog.remove_region("yard")
    with pytest.raises(RegionNotFoundError):
        catalog.enable_region("yard")


def test_list_regions(catalog):
    assert catalog.list_regions() == [
        {"region_id": "depot", "vertex_count": 4, "enabled": True, "description": "Loading depot"},
        {"region_id": "yard", "vertex_count": 4, "enabled": True, "description": None},
    ]


def test_catalog_from_config(config_path):
    catalog = RegionCatalog.from_config(CatalogConfig.from_yaml(config_path))

    assert len(catalog) == 3
    assert [info["enabled"] for info in catalog.list_regions()] == [True, True, False]
    assert catalog.regions_containing(Point(5, 1)) == []


def test_catalog_logs_structured_events(caplog):
    catalog = RegionCatalog(logger=create_logger("test_events"))

    with caplog.at_level(logging.INFO, logger="polyprobe.test_events"):
        catalog.add_region("depot", Polygon([(0, 0), (4, 0), (4, 4), (0, 4)]))

    entries = [json.loads(record.getMessage()) for record in caplog.records]
    assert entries[-1]["event"] == LogEvent.REGION_ADDED.value
    assert entries[-1]["component"] == "test_events"
    assert entries[-1]["metadata"] == {"region_id": "depot", "vertex_count": 4, "enabled": True}


# ========== CLI ==========

def test_cli_contains(config_path, capsys):
    assert main(["contains", str(config_path), "3", "3"]) == 0
    assert capsys.readouterr().out.split() == ["depot", "yard"]


def test_cli_contains_no_match(config_path, capsys):
    assert main(["contains", str(config_path), "20", "20"]) == 1
    assert capsys.readouterr().out == ""


def test_cli_list_regions(config_path, capsys):
    assert main(["list-regions", str(config_path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "depot\t4 vertices\tenabled\tLoading depot"
    assert lines[2] == "closed\t3 vertices\tdisabled"


def test_cli_wkt(config_path, capsys):
    assert main(["wkt", str(config_path), "depot"]) == 0
    assert capsys.readouterr().out.strip() == (
        "POLYGON ((0.0 0.0, 4.0 0.0, 4.0 4.0, 0.0 4.0, 0.0 0.0))"
    )


def test_cli_unknown_region(config_path, capsys):
    assert main(["wkt", str(config_path), "nowhere"]) == 2
    assert "region not found: nowhere" in capsys.readouterr().err


def test_cli_missing_config(tmp_path, capsys):
    assert main(["list-regions", str(tmp_path / "missing.yaml")]) == 2
    assert "Config file not found" in capsys.readouterr().err


def test_cli_invalid_config_values(tmp_path, capsys):
    path = tmp_path / "bad_level.yaml"
    path.write_text("logging:\n  level: 10\n")

    assert main(["list-regions", str(path)]) == 2
    assert "Invalid logging level" in capsys.readouterr().err


def test_cli_without_command(capsys):
    assert main([]) == 2
