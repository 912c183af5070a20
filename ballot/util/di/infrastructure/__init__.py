"""Infrastructure components that tests can swap for in-memory versions."""

# ProdPersistenceProvider must be imported so get_provider can find it
from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = ["PersistenceProvider", "ProdPersistenceProvider"]
