"""
FastAPI binding for mapped controllers

Mounts the handlers of a controller instance onto an APIRouter using the
same declarations the endpoint inventory reads, so what the gateway routes
and what the service serves cannot drift apart.
"""

import logging
from typing import Optional

from fastapi import APIRouter

from .inventory import normalize_path, resolve_base_path
from .mapping import declared_handlers, method_mapping

logger = logging.getLogger(__name__)


def mount_controller(instance, router: Optional[APIRouter] = None) -> APIRouter:
    """
    Register every mapped handler of a controller instance on a router.

    Args:
        instance: Controller object (its class carries the mappings)
        router: Router to extend; a new one is created if omitted

    Returns:
        The router, ready for app.include_router()
    """
    router = router or APIRouter()
    cls = type(instance)
    base_path = resolve_base_path(cls)

    for name, func in declared_handlers(cls):
        mapping = method_mapping(func)
        if mapping is None:
            continue
        path = normalize_path(base_path + mapping.first_path())
        if len(path) > 1:
            path = path.rstrip("/")
        router.add_api_route(
            path,
            getattr(instance, name),
            methods=list(mapping.http_methods()),
            name=f"{cls.__name__}.{name}",
        )
        logger.debug(f"Mounted {cls.__name__}.{name} at {list(mapping.http_methods())} {path}")

    return router
