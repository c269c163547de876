from collections.abc import Callable
from typing import TypeVar

from dependency_injector import providers
from dependency_injector.providers import Provider

from lioarcade.core import Container, container
from lioarcade.database import DatabaseSession

T = TypeVar("T")


def _provider_name(provider: Provider[T]) -> str:
    for name, candidate in container.providers.items():
        if candidate is provider:
            return name
    raise ValueError(f"Provider {provider!r} is not registered on the container")


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Create a FastAPI dependency for a container provider.

    Every call builds its object graph from a container bound to the
    request-scoped database session. The shared container is never
    overridden, so concurrent requests cannot see each other's session.
    """
    name = _provider_name(provider)

    def dependency(db: DatabaseSession) -> T:
        return getattr(Container(db=providers.Object(db)), name)()

    return dependency
