"""
polyprobe CLI - Main entry point.

Loads a region catalog from YAML and answers point queries against it.
"""

import argparse
import sys
from typing import List, Optional

from polyprobe_geometry import Point
from polyprobe_regions import CatalogConfig, RegionCatalog, RegionNotFoundError
from polyprobe_regions.logging import LogEvent, create_logger


EXIT_OK = 0
EXIT_NO_MATCH = 1
EXIT_ERROR = 2


def load_catalog(config_path: str) -> RegionCatalog:
    """
    Load and build a region catalog.

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If YAML or config is invalid
    """
    config = CatalogConfig.from_yaml(config_path)
    return RegionCatalog.from_config(config)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polyprobe",
        description="polyprobe - Point-in-polygon queries over a region catalog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Which regions contain (2, 2)?
  polyprobe contains config/regions.yaml 2 2

  # List configured regions
  polyprobe list-regions config/regions.yaml

  # Print a region as WKT
  polyprobe wkt config/regions.yaml depot
"""
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    contains = subparsers.add_parser('contains', help='List regions containing a point')
    contains.add_argument('config', help='Path to region catalog YAML')
    contains.add_argument('x', type=float, help='Point x-coordinate')
    contains.add_argument('y', type=float, help='Point y-coordinate')

    list_regions = subparsers.add_parser('list-regions', help='List configured regions')
    list_regions.add_argument('config', help='Path to region catalog YAML')

    wkt = subparsers.add_parser('wkt', help='Print a region polygon as WKT')
    wkt.add_argument('config', help='Path to region catalog YAML')
    wkt.add_argument('region_id', help='Region ID')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_ERROR

    try:
        catalog = load_catalog(args.config)

        if args.command == 'contains':
            matches = catalog.regions_containing(Point(args.x, args.y))
            for region_id in matches:
                print(region_id)
            return EXIT_OK if matches else EXIT_NO_MATCH

        elif args.command == 'list-regions':
            for info in catalog.list_regions():
                state = "enabled" if info['enabled'] else "disabled"
                line = f"{info['region_id']}\t{info['vertex_count']} vertices\t{state}"
                if info['description']:
                    line += f"\t{info['description']}"
                print(line)
            return EXIT_OK

        elif args.command == 'wkt':
            print(catalog.get_region(args.region_id).to_wkt())
            return EXIT_OK

    except RegionNotFoundError as e:
        print(f"Error: region not found: {e.args[0]}", file=sys.stderr)
        return EXIT_ERROR

    except (FileNotFoundError, ValueError) as e:
        create_logger("cli").error(
            event=LogEvent.CONFIG_ERROR,
            message="Failed to load region catalog",
            metadata={'config': args.config},
            exc_info=e,
        )
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    return EXIT_ERROR


if __name__ == '__main__':
    sys.exit(main())
