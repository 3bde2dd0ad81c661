"""Infrastructure providers."""

# Import bases
from .content import ProdContentProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "PersistenceProvider",
    "ProdContentProvider",
    "ProdPersistenceProvider",
]
