"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for the region layer.

Event Naming Convention:
    <component>.<action>  or  error.<condition>

    component: region, config
    action: added, removed, enabled, disabled, query, loaded
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - region.*: Catalog mutations and queries
    - config.*: Configuration loading
    - error.*: Error conditions
    """

    # ========== Region Events ==========
    REGION_ADDED = "region.added"
    """Region registered in the catalog."""

    REGION_REMOVED = "region.removed"
    """Region removed from the catalog."""

    REGION_ENABLED = "region.enabled"
    """Region enabled for queries."""

    REGION_DISABLED = "region.disabled"
    """Region excluded from queries."""

    REGION_QUERY = "region.query"
    """Point tested against the enabled regions."""

    # ========== Config Events ==========
    CONFIG_LOADED = "config.loaded"
    """Catalog configuration loaded and validated."""

    # ========== Error Events ==========
    CONFIG_ERROR = "error.config"
    """Configuration missing, malformed or invalid."""

    REGION_NOT_FOUND = "error.region_not_found"
    """Lookup of an unknown region id."""
