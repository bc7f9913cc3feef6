#!/usr/bin/env python3
"""Infrastructure configuration

Message bus (NATS JetStream) and service catalog (Consul) endpoints used by
the route scanner.
"""
import os
from dataclasses import dataclass
from typing import Optional

def _int(val: str, default: int) -> int:
    try:
        return int(val) if val else default
    except ValueError:
        return default


@dataclass
class InfraConfig:
    """Infrastructure service endpoints"""

    # ===========================================
    # NATS (native - port 4222)
    # ===========================================
    nats_host: str = "localhost"
    nats_port: int = 4222
    nats_url: Optional[str] = None
    nats_stream: str = "gateway-routes"
    nats_connect_attempts: int = 3
    nats_connect_timeout: int = 2

    # ===========================================
    # Consul (HTTP - port 8500)
    # ===========================================
    consul_host: str = "localhost"
    consul_port: int = 8500

    @property
    def nats_servers(self) -> str:
        """NATS server URL, explicit URL wins over host/port"""
        return self.nats_url or f"nats://{self.nats_host}:{self.nats_port}"

    @classmethod
    def from_env(cls) -> 'InfraConfig':
        """Load infrastructure config from environment"""
        return cls(
            # NATS
            nats_host=os.getenv("NATS_HOST", "localhost"),
            nats_port=_int(os.getenv("NATS_PORT", "4222"), 4222),
            nats_url=os.getenv("NATS_URL"),
            nats_stream=os.getenv("NATS_ROUTE_STREAM", "gateway-routes"),
            nats_connect_attempts=_int(os.getenv("NATS_CONNECT_ATTEMPTS", "3"), 3),
            nats_connect_timeout=_int(os.getenv("NATS_CONNECT_TIMEOUT", "2"), 2),

            # Consul
            consul_host=os.getenv("CONSUL_HOST", "localhost"),
            consul_port=_int(os.getenv("CONSUL_PORT", "8500"), 8500),
        )
