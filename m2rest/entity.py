"""Shared plumbing for the entity accessors."""

import enum
import logging
from typing import TYPE_CHECKING

from .errors import InvalidUsage

if TYPE_CHECKING:
    from .client import MagentoClient


class EntityState(enum.Enum):
    UNINITIALIZED = "uninitialized"
    ROUTE_KNOWN = "route_known"
    HYDRATED = "hydrated"


class RemoteEntity:
    """Local, mutable view of one remote resource.

    The route is resolved once (by a create or a lookup) and then stays bound
    to the same resource. Instances are not safe for concurrent use; share the
    client between threads instead.
    """

    def __init__(self, client: "MagentoClient", route: str | None = None):
        self.client = client
        self._route: str | None = None
        self._hydrated = False
        if route is not None:
            self._bind_route(route)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._route or '(unresolved)'}>"

    @property
    def route(self) -> str | None:
        return self._route

    @property
    def state(self) -> EntityState:
        if self._route is None:
            return EntityState.UNINITIALIZED
        if self._hydrated:
            return EntityState.HYDRATED
        return EntityState.ROUTE_KNOWN

    @property
    def logger(self) -> logging.Logger:
        return self.client.logger

    def _bind_route(self, route: str) -> None:
        if self._route is not None and self._route != route:
            raise InvalidUsage(f"route is bound to {self._route}, cannot rebind to {route}")
        self._route = route

    def _mark_hydrated(self) -> None:
        self._hydrated = True

    def require_route(self, operation: str) -> str:
        """Return the route, failing fast while the entity is unresolved."""
        if self._route is None:
            raise InvalidUsage(f"{type(self).__name__} route is not set", operation)
        return self._route
