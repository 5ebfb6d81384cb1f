"""
Structured Logging for polyprobe regions
========================================

Bounded Context: Observability

JSON-structured logging for the region catalog and CLI. The geometry kernel
itself does not log.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from polyprobe_regions.logging import create_logger, LogEvent
    >>> logger = create_logger("catalog")
    >>> logger.info(
    ...     event=LogEvent.REGION_ADDED,
    ...     message="Region 'depot' added",
    ...     metadata={'region_id': 'depot', 'vertex_count': 4}
    ... )

Output:
    {"timestamp": "...", "level": "INFO", "component": "catalog",
     "event": "region.added", "message": "Region 'depot' added",
     "metadata": {"region_id": "depot", "vertex_count": 4}}
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
