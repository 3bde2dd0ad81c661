"""Dependency injection wiring for the blog API.

``PROVIDERS`` lists one entry per concern. An entry with subclasses is a
swappable component (settings, relational persistence): its production
and mock implementations are subclasses told apart by ``__is_mock__``.
"""

from typing import Type

from folio.util.di.application import ProdApplicationProvider
from folio.util.di.base import Component, ProviderBase
from folio.util.di.core import ConfigProvider, ProdConfigProvider, SettingsSectionProvider
from folio.util.di.domain import ProdDomainProvider
from folio.util.di.infrastructure import (
    PersistenceProvider,
    ProdContentProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ConfigProvider,
    SettingsSectionProvider,
    PersistenceProvider,
    ProdContentProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
]


def get_provider(base: Type[ProviderBase], use_mock: bool = False) -> Type[ProviderBase]:
    """Resolve a ``PROVIDERS`` entry to the class to instantiate.

    Raises:
        ValueError: If a swappable component lacks the requested variant
    """
    variants = base.__subclasses__()
    if not variants:
        return base

    for variant in variants:
        if getattr(variant, "__is_mock__", False) == use_mock:
            return variant

    kind = "mock" if use_mock else "production"
    raise ValueError(
        f"No {kind} provider for component {base.__mock_component__ or base.__name__}"
    )


__all__ = [
    "Component",
    "ConfigProvider",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdContentProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "SettingsSectionProvider",
    "get_provider",
]
