"""
Route Publisher

Serializes route records and hands them to the sink one by one, keyed by the
scanning service's short name. Fire-and-forget: no acknowledgement, no
retry, no buffering of records the sink refused.
"""

import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .config.scanner_config import DEFAULT_TOPIC
from .models import RouteConfigMessage
from .protocols import RouteSerializationError, RouteSinkProtocol

logger = logging.getLogger(__name__)


@dataclass
class PublishReport:
    """Outcome of one publish batch"""
    attempted: int = 0
    sent: int = 0
    failed: int = 0


def serialize_routes(routes: Sequence[RouteConfigMessage]) -> List[Tuple[RouteConfigMessage, bytes]]:
    """Wire form of every route; any failure aborts the whole batch"""
    serialized = []
    for route in routes:
        try:
            serialized.append((route, route.to_json()))
        except Exception as e:
            raise RouteSerializationError(f"Cannot serialize route {getattr(route, 'route_id', route)!r}: {e}") from e
    return serialized


class RoutePublisher:
    """Sends route records to the gateway topic"""

    def __init__(self, sink: RouteSinkProtocol, topic: str = DEFAULT_TOPIC):
        self.sink = sink
        self.topic = topic

    async def publish(self, key: str, routes: Sequence[RouteConfigMessage]) -> PublishReport:
        """
        Publish a batch of routes.

        Each send is independent: a sink failure is logged and the remaining
        records are still attempted.

        Args:
            key: Partition/routing key (the scanning service's short name)
            routes: Records to publish, in order

        Returns:
            PublishReport with sent/failed counts

        Raises:
            RouteSerializationError: a record could not be serialized
        """
        report = PublishReport()
        for route, payload in serialize_routes(routes):
            report.attempted += 1
            try:
                await self.sink.publish(self.topic, key, payload)
            except Exception as e:
                report.failed += 1
                logger.error(f"Failed to send route configuration {route.route_id}: {e}")
                continue
            report.sent += 1
            logger.info(f"Sent route configuration: {route.route_id} -> {list(route.predicates)}")

        return report
