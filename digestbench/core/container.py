"""
Service container for digestbench.

A process-wide mapping from interface type to a dependency-injector
provider. bootstrap() fills it with the logger and the algorithm
registry; commands and services resolve from it.
"""

from collections.abc import Callable
from typing import Optional, TypeVar

from dependency_injector import providers

T = TypeVar("T")


class ServiceContainer:
    """Interface-keyed providers, shared through get_instance()."""

    _instance: Optional["ServiceContainer"] = None

    def __init__(self) -> None:
        self._providers: dict[type, providers.Provider] = {}

    @classmethod
    def get_instance(cls) -> "ServiceContainer":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Forget the shared container and everything registered in it."""
        cls._instance = None

    def register_singleton(
        self,
        interface: type[T],
        implementation: T | None = None,
        factory: Callable[[], T] | None = None,
    ) -> None:
        """
        Register one shared instance for an interface.

        Args:
            interface: Type used as the lookup key
            implementation: Ready-made instance
            factory: Called on first resolve instead, when no instance is given

        Raises:
            ValueError: If neither implementation nor factory is given
        """
        if implementation is not None:
            self._providers[interface] = providers.Object(implementation)
        elif factory is not None:
            self._providers[interface] = providers.Singleton(factory)
        else:
            raise ValueError("Must provide either implementation or factory")

    def resolve(self, interface: type[T]) -> T:
        """
        Resolve a service by interface.

        Raises:
            KeyError: If nothing is registered for the interface
        """
        provider = self._providers.get(interface)
        if provider is None:
            raise KeyError(f"No provider registered for: {interface}")
        return provider()

    def try_resolve(self, interface: type[T]) -> T | None:
        provider = self._providers.get(interface)
        return provider() if provider is not None else None


def get_container() -> ServiceContainer:
    return ServiceContainer.get_instance()


def resolve(interface: type[T]) -> T:
    """Resolve a service from the shared container."""
    return get_container().resolve(interface)


def try_resolve(interface: type[T]) -> T | None:
    """Resolve a service from the shared container, or None."""
    return get_container().try_resolve(interface)
