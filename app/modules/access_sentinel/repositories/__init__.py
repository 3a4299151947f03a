"""Repository pattern for reference data and access logs"""

from app.modules.access_sentinel.repositories.access_event_repository import (
    AccessEventRepository,
    AccessEventMapper,
)
from app.modules.access_sentinel.repositories.csv_access_event_repository import (
    CSVAccessEventRepository,
)
from app.modules.access_sentinel.repositories.in_memory_access_event_repository import (
    InMemoryAccessEventRepository,
)
from app.modules.access_sentinel.repositories.reference_registry import ReferenceRegistry
from app.modules.access_sentinel.repositories.repository_factory import (
    AccessEventRepositoryFactory,
)
from app.modules.access_sentinel.repositories.synthetic_access_event_repository import (
    SyntheticAccessEventRepository,
)

__all__ = [
    "AccessEventRepository",
    "AccessEventMapper",
    "AccessEventRepositoryFactory",
    "CSVAccessEventRepository",
    "InMemoryAccessEventRepository",
    "ReferenceRegistry",
    "SyntheticAccessEventRepository",
]
