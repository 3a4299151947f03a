from app.modules.access_sentinel.data.facility_catalog import (
    DEFAULT_IDENTITIES,
    DEFAULT_LOCATIONS,
)

__all__ = ["DEFAULT_IDENTITIES", "DEFAULT_LOCATIONS"]
