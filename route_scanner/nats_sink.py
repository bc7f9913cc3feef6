"""
NATS JetStream Route Sink

Publishes serialized route records to NATS JetStream. The topic is used as
the subject and the routing key travels in the X-Route-Key header, so a
gateway consumer can upsert by route id and still see which service sent
the record.

Only the connection is retried; individual publishes are not.
"""

import logging
from typing import Optional

import nats
from nats.errors import Error as NATSError
from nats.js.errors import NotFoundError
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from .config.infra_config import InfraConfig
from .config.scanner_config import DEFAULT_TOPIC
from .protocols import SinkError, SinkNotConnectedError

logger = logging.getLogger(__name__)

ROUTE_KEY_HEADER = "X-Route-Key"


class NATSRouteSink:
    """
    JetStream-backed implementation of RouteSinkProtocol.

    Usage:
        sink = NATSRouteSink(InfraConfig.from_env(), client_name="user")
        await sink.connect()
        await sink.publish("gateway-route-config", "user", payload)
        await sink.close()
    """

    def __init__(
        self,
        config: Optional[InfraConfig] = None,
        topic: str = DEFAULT_TOPIC,
        client_name: Optional[str] = None,
    ):
        self.config = config or InfraConfig.from_env()
        self.topic = topic
        self.client_name = client_name or "route-scanner"
        self._nc = None
        self._js = None

        logger.info(f"NATS route sink initialized: {self.config.nats_servers} (stream={self.config.nats_stream})")

    async def connect(self):
        """Connect to NATS and make sure the route stream exists"""
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(max(1, self.config.nats_connect_attempts)),
            wait=wait_exponential(multiplier=0.5, max=5),
            retry=retry_if_exception_type((OSError, NATSError)),
            reraise=True,
        ):
            with attempt:
                self._nc = await nats.connect(
                    servers=self.config.nats_servers,
                    name=self.client_name,
                    connect_timeout=self.config.nats_connect_timeout,
                )

        self._js = self._nc.jetstream()
        await self._ensure_stream()
        logger.info(f"Connected to NATS at {self.config.nats_servers} as {self.client_name}")

    async def _ensure_stream(self):
        """Create the route stream if it does not exist yet (idempotent)"""
        stream = self.config.nats_stream
        try:
            await self._js.stream_info(stream)
            logger.debug(f"Stream '{stream}' ready")
        except NotFoundError:
            await self._js.add_stream(name=stream, subjects=[self.topic])
            logger.info(f"Created stream '{stream}' for subject {self.topic}")

    async def publish(self, topic: str, key: str, payload: bytes) -> None:
        """Publish one record; raises SinkError on any failure"""
        if not self.is_connected:
            raise SinkNotConnectedError("Not connected to NATS")

        try:
            ack = await self._js.publish(topic, payload, headers={ROUTE_KEY_HEADER: key})
        except Exception as e:
            raise SinkError(f"Publish to {topic} failed: {e}") from e

        logger.debug(f"Published to {topic} key={key} stream={ack.stream} seq={ack.seq}")

    async def close(self):
        """Flush pending messages and close the connection"""
        if self._nc is not None:
            try:
                await self._nc.drain()
            finally:
                self._nc = None
                self._js = None
            logger.info("Disconnected from NATS")

    @property
    def is_connected(self) -> bool:
        """Check if connected to NATS"""
        return self._nc is not None and self._js is not None and self._nc.is_connected
