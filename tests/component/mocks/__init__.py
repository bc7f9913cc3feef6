"""
Component Test Mocks

Shared mock implementations for component testing.
These mocks replace real I/O dependencies (NATS, Consul).
"""

from .sink_mock import MockRouteSink
from .nats_mock import MockNATSConnection, MockJetStream
from .consul_mock import MockConsul

__all__ = [
    'MockRouteSink',
    'MockNATSConnection',
    'MockJetStream',
    'MockConsul',
]
