"""
Route Mapping Declarations

Decorators that declare the HTTP surface of a controller class. They only
record metadata on the decorated objects; the endpoint inventory reads it
back to build gateway routes and web.mount_controller() reads it to bind
the handlers onto a FastAPI router.

Usage:
    @rest_controller
    @request_mapping("/api/users")
    class UserController:

        @get_mapping
        async def list_users(self):
            ...

        @get_mapping("/{user_id}")
        async def get_user(self, user_id: int):
            ...
"""

import inspect
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List, Optional, Sequence, Tuple, Union

logger = logging.getLogger(__name__)

REQUEST = "REQUEST"
GET = "GET"
POST = "POST"
PUT = "PUT"
DELETE = "DELETE"
PATCH = "PATCH"

HTTP_VERBS = (GET, POST, PUT, DELETE, PATCH)

# Lookup order when a method carries several mappings
MAPPING_PRIORITY = (REQUEST,) + HTTP_VERBS

CLASS_MAPPING_ATTR = "__route_class_mapping__"
METHOD_MAPPINGS_ATTR = "__route_mappings__"

PathSpec = Union[None, str, Sequence[str]]


@dataclass(frozen=True)
class Mapping:
    """A single mapping declaration (class-level or method-level)"""
    kind: str
    value: Tuple[str, ...] = ()
    path: Tuple[str, ...] = ()
    methods: Tuple[str, ...] = ()

    def first_path(self) -> str:
        """First declared value, then first declared path, else empty"""
        if self.value:
            return self.value[0]
        if self.path:
            return self.path[0]
        return ""

    def http_methods(self) -> Tuple[str, ...]:
        """Verbs this mapping answers to"""
        if self.kind != REQUEST:
            return (self.kind,)
        return self.methods or HTTP_VERBS


def _as_tuple(spec: PathSpec) -> Tuple[str, ...]:
    if spec is None:
        return ()
    if isinstance(spec, str):
        return (spec,)
    return tuple(spec)


def _declare(kind: str, value, path: PathSpec, methods: Optional[Sequence[str]] = None):
    # Bare decorator usage: @get_mapping
    if callable(value):
        return _declare(kind, None, None, methods)(value)

    mapping = Mapping(
        kind=kind,
        value=_as_tuple(value),
        path=_as_tuple(path),
        methods=tuple(m.upper() for m in (methods or ())),
    )

    def decorator(target):
        if inspect.isclass(target):
            if kind != REQUEST:
                raise TypeError(f"{kind} mapping cannot be declared on class {target.__name__}")
            setattr(target, CLASS_MAPPING_ATTR, mapping)
            return target

        func = getattr(target, "__func__", target)
        mappings: Dict[str, Mapping] = dict(getattr(func, METHOD_MAPPINGS_ATTR, {}))
        mappings[kind] = mapping
        setattr(func, METHOD_MAPPINGS_ATTR, mappings)
        return target

    return decorator


def request_mapping(value: PathSpec = None, *, path: PathSpec = None,
                    methods: Optional[Sequence[str]] = None):
    """Generic mapping; on a class it declares the base path"""
    return _declare(REQUEST, value, path, methods)


def get_mapping(value: PathSpec = None, *, path: PathSpec = None):
    return _declare(GET, value, path)


def post_mapping(value: PathSpec = None, *, path: PathSpec = None):
    return _declare(POST, value, path)


def put_mapping(value: PathSpec = None, *, path: PathSpec = None):
    return _declare(PUT, value, path)


def delete_mapping(value: PathSpec = None, *, path: PathSpec = None):
    return _declare(DELETE, value, path)


def patch_mapping(value: PathSpec = None, *, path: PathSpec = None):
    return _declare(PATCH, value, path)


def class_mapping(cls: type) -> Optional[Mapping]:
    """Class-level mapping declared on cls itself (not inherited)"""
    return vars(cls).get(CLASS_MAPPING_ATTR)


def method_mapping(func: Callable) -> Optional[Mapping]:
    """Highest-priority mapping declared on a handler, or None"""
    mappings = getattr(getattr(func, "__func__", func), METHOD_MAPPINGS_ATTR, None)
    if not mappings:
        return None
    for kind in MAPPING_PRIORITY:
        if kind in mappings:
            return mappings[kind]
    return None


def declared_handlers(cls: type) -> Iterator[Tuple[str, Callable]]:
    """
    Functions declared in the class body, in definition order.

    Inherited members are not visited. staticmethod / classmethod wrappers
    are unwrapped.
    """
    for name, member in vars(cls).items():
        func = getattr(member, "__func__", member)
        if inspect.isfunction(func):
            yield name, func


# ============================================================================
# Controller Registry
# ============================================================================

def _in_package(module: str, base_package: str) -> bool:
    return module == base_package or module.startswith(base_package + ".")


class ControllerRegistry:
    """Controller classes in registration (discovery) order"""

    def __init__(self):
        self._controllers: List[type] = []

    def register(self, cls: type) -> type:
        if cls not in self._controllers:
            self._controllers.append(cls)
            logger.debug(f"Registered controller {cls.__module__}.{cls.__qualname__}")
        return cls

    def controllers(self, base_package: Optional[str] = None) -> List[type]:
        """Registered controllers, optionally limited to one package"""
        if not base_package:
            return list(self._controllers)
        return [c for c in self._controllers if _in_package(c.__module__, base_package)]

    def clear(self):
        self._controllers.clear()


_registry = ControllerRegistry()


def get_controller_registry() -> ControllerRegistry:
    """Process-wide default registry"""
    return _registry


def rest_controller(cls: Optional[type] = None, *, registry: Optional[ControllerRegistry] = None):
    """Register a controller class; usable bare or with a registry argument"""
    target_registry = registry if registry is not None else _registry

    def decorator(klass: type) -> type:
        return target_registry.register(klass)

    if cls is not None:
        return decorator(cls)
    return decorator
