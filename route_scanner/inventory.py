"""
Endpoint Inventory

Reads the mapping declarations of controller classes and produces, per class,
its normalized base path and the distinct normalized paths of its handlers.
Pure computation, no I/O.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple

from .mapping import class_mapping, declared_handlers, method_mapping

logger = logging.getLogger(__name__)

_SLASH_RUN = re.compile(r"/+")


@dataclass(frozen=True)
class ControllerInventory:
    """Normalized endpoint paths of one controller class"""
    name: str
    base_path: str
    paths: Tuple[str, ...]

    @property
    def has_endpoints(self) -> bool:
        return bool(self.paths)


def normalize_path(path: Optional[str]) -> str:
    """Collapse repeated slashes and guarantee a leading one; empty -> '/'"""
    if not path:
        return "/"
    path = _SLASH_RUN.sub("/", path)
    if not path.startswith("/"):
        path = "/" + path
    return path


def resolve_base_path(cls: type) -> str:
    """Base path from the class-level mapping ('value' before 'path')"""
    mapping = class_mapping(cls)
    return normalize_path(mapping.first_path() if mapping else "")


def extract_method_path(func: Callable) -> Optional[str]:
    """Path declared on a handler, '' when mapped without one, None when unmapped"""
    mapping = method_mapping(func)
    if mapping is None:
        return None
    return mapping.first_path()


def inventory_controller(cls: type) -> ControllerInventory:
    """Collect the distinct full paths declared on one controller class"""
    base_path = resolve_base_path(cls)

    # dict keeps first-seen order while collapsing duplicates
    paths = {}
    for _, func in declared_handlers(cls):
        method_path = extract_method_path(func)
        if method_path is not None:
            paths[normalize_path(base_path + method_path)] = None

    return ControllerInventory(
        name=cls.__name__,
        base_path=base_path,
        paths=tuple(paths),
    )


def build_inventory(classes: Iterable[type]) -> List[ControllerInventory]:
    """Inventory every class, keeping the given (discovery) order"""
    inventory = []
    for cls in classes:
        entry = inventory_controller(cls)
        logger.debug(f"Inventoried {entry.name}: base={entry.base_path} paths={list(entry.paths)}")
        inventory.append(entry)
    return inventory
