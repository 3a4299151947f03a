"""Factory for creating access event repositories"""

import random
from pathlib import Path

from .access_event_repository import AccessEventRepository
from .csv_access_event_repository import CSVAccessEventRepository
from .in_memory_access_event_repository import InMemoryAccessEventRepository
from .reference_registry import ReferenceRegistry
from .synthetic_access_event_repository import SyntheticAccessEventRepository


class AccessEventRepositoryFactory:
    """Factory for creating appropriate access event repositories"""

    @staticmethod
    def create_repository(
        source_type: str = "synthetic", registry: ReferenceRegistry | None = None, **kwargs
    ) -> AccessEventRepository:
        """Create a repository by source name: csv, synthetic or memory"""
        source_type = source_type.lower()

        if source_type == "csv":
            return AccessEventRepositoryFactory.create_csv_repository(**kwargs)
        elif source_type == "synthetic":
            return AccessEventRepositoryFactory.create_synthetic_repository(
                registry or ReferenceRegistry.default(), **kwargs
            )
        elif source_type == "memory":
            return InMemoryAccessEventRepository(**kwargs)
        else:
            raise ValueError(f"Unknown repository type: {source_type}")

    @staticmethod
    def create_csv_repository(csv_path: str | Path) -> CSVAccessEventRepository:
        return CSVAccessEventRepository(csv_path=csv_path)

    @staticmethod
    def create_synthetic_repository(
        registry: ReferenceRegistry, count: int = 60, seed: int | None = None, **kwargs
    ) -> SyntheticAccessEventRepository:
        """Create a generator; a seed makes its batches reproducible"""
        return SyntheticAccessEventRepository(
            registry, count=count, rng=random.Random(seed), **kwargs
        )
