"""
Consul Service Catalog

Lists the services registered in Consul so a gateway-side process can
publish the aggregated documentation routes for all of them.
Service registration itself is handled by the Consul agent sidecar.
"""

import logging
from typing import Iterable, List, Optional

import consul

from .config.infra_config import InfraConfig
from .synthesizer import normalize_service_name

logger = logging.getLogger(__name__)

DEFAULT_EXCLUDED = ("consul", "gateway")


class ServiceCatalog:
    """Consul catalog reader"""

    def __init__(
        self,
        config: Optional[InfraConfig] = None,
        excluded: Iterable[str] = DEFAULT_EXCLUDED,
        client=None,
    ):
        """
        Args:
            config: Consul endpoint (defaults to InfraConfig.from_env())
            excluded: Short names never returned
            client: Pre-built consul.Consul (tests)
        """
        self.config = config or InfraConfig.from_env()
        self.excluded = set(excluded)
        self.consul = client or consul.Consul(host=self.config.consul_host, port=self.config.consul_port)
        logger.info(f"Consul service catalog initialized: {self.config.consul_host}:{self.config.consul_port}")

    def list_service_names(self) -> List[str]:
        """Sorted short names of the registered services; [] when Consul is unreachable"""
        try:
            index, services = self.consul.catalog.services()
        except Exception as e:
            logger.error(f"Failed to list services from Consul: {e}")
            return []

        names = {normalize_service_name(name) for name in (services or {})}
        names -= self.excluded
        names.discard("unknown")
        return sorted(names)
