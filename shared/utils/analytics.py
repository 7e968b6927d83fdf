"""Analytics collaborator interface

The engine reports notable events (streak milestones, generated insights)
through a sink so the host app can forward them to its analytics service.
"""

import logging
from typing import Any, Dict, List, Optional, Protocol, Tuple

logger = logging.getLogger(__name__)


class AnalyticsSink(Protocol):
    def track(self, event: str, properties: Optional[Dict[str, Any]] = None) -> None:
        ...


class LoggingAnalyticsSink:
    """Default sink: writes events to the log"""

    def track(self, event: str, properties: Optional[Dict[str, Any]] = None) -> None:
        logger.info(f"analytics event={event} properties={properties or {}}")


class RecordingAnalyticsSink:
    """Keeps events in memory (tests, batch export)"""

    def __init__(self):
        self.events: List[Tuple[str, Dict[str, Any]]] = []

    def track(self, event: str, properties: Optional[Dict[str, Any]] = None) -> None:
        self.events.append((event, dict(properties or {})))

    def names(self) -> List[str]:
        return [name for name, _ in self.events]
