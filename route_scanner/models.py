"""
Route Scanner Data Models

Pydantic model for the route configuration record published to the gateway.
"""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

LOAD_BALANCER_SCHEME = "lb://"


class RouteConfigMessage(BaseModel):
    """
    One gateway route, as published on the route topic.

    Immutable once built. Wire names are camelCase:

        {"routeId", "uri", "predicates", "filters", "orderNum",
         "description", "enabled", "serviceName"}
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    route_id: str = Field(..., alias="routeId", min_length=1)
    uri: str
    predicates: Tuple[str, ...]
    filters: Tuple[str, ...] = ()
    order_num: int = Field(..., alias="orderNum")
    description: str = ""
    enabled: bool = True
    service_name: str = Field(..., alias="serviceName")

    @field_validator("uri")
    @classmethod
    def uri_must_be_load_balanced(cls, v: str) -> str:
        if not v.startswith(LOAD_BALANCER_SCHEME) or len(v) == len(LOAD_BALANCER_SCHEME):
            raise ValueError(f"Route target must use the {LOAD_BALANCER_SCHEME} scheme, got {v!r}")
        return v

    @field_validator("predicates")
    @classmethod
    def predicates_not_empty(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        if not v:
            raise ValueError("Route must carry at least one predicate")
        return v

    def to_json(self) -> bytes:
        """Canonical wire form"""
        return self.model_dump_json(by_alias=True).encode("utf-8")

    @classmethod
    def from_json(cls, data) -> "RouteConfigMessage":
        return cls.model_validate_json(data)
