"""Dependency injection wiring.

Every provider in PROVIDERS is either concrete (no subclasses, used as-is)
or a mockable component: a base class carrying ``__mock_component__`` with
one production and one mock subclass told apart by ``__is_mock__``.
"""

from typing import Type

from topmeup.util.di.application import ProdApplicationProvider
from topmeup.util.di.base import Component, ProviderBase
from topmeup.util.di.core import ProdConfigProvider
from topmeup.util.di.domain import ProdDomainProvider
from topmeup.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def mockable_components() -> set[Component]:
    """Names of the components that have a mock implementation registered."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ and base.__subclasses__()
    }


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for one PROVIDERS entry.

    Mock subclasses are only visible once their module is imported, so
    production code never sees them.

    Raises:
        ValueError: If a mockable component lacks the requested implementation
    """
    implementations = {
        getattr(cls, "__is_mock__", False): cls for cls in base.__subclasses__()
    }
    if not implementations:
        return base

    try:
        return implementations[use_mock]
    except KeyError:
        kind = "mock" if use_mock else "production"
        raise ValueError(
            f"No {kind} implementation for {base.__mock_component__ or base.__name__}"
        )


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "mockable_components",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
