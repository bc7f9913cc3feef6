"""
Route Scanner Protocols (Interfaces)

These interfaces define contracts for dependency injection.
NO import-time I/O dependencies - safe to import anywhere.
"""
from typing import Protocol, runtime_checkable


# ============================================================================
# Custom Exceptions
# ============================================================================

class RouteScannerError(Exception):
    """Base exception for route scanner errors"""
    pass


class RouteSynthesisError(RouteScannerError):
    """Route generation broke an invariant (e.g. duplicate route id in a batch)"""
    pass


class RouteSerializationError(RouteScannerError):
    """A route record could not be serialized to its wire form"""
    pass


class SinkError(RouteScannerError):
    """The message sink rejected a publish call"""
    pass


class SinkNotConnectedError(SinkError):
    """Publish attempted before the sink connected"""
    pass


# ============================================================================
# Sink Protocol
# ============================================================================

@runtime_checkable
class RouteSinkProtocol(Protocol):
    """
    Interface for the message bus the route records go to.

    publish() must return (or raise) once the record is handed over; no
    acknowledgement from consumers is awaited.
    """

    async def publish(self, topic: str, key: str, payload: bytes) -> None:
        """Hand one serialized record to the bus"""
        ...


@runtime_checkable
class ConnectableSinkProtocol(RouteSinkProtocol, Protocol):
    """Sink with an explicit connection lifecycle"""

    async def connect(self) -> None:
        ...

    async def close(self) -> None:
        ...
