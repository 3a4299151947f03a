"""Immutable catalogs of access points and badge holders"""

from types import MappingProxyType
from typing import Any, Iterable

from app.modules.access_sentinel.data.facility_catalog import (
    DEFAULT_IDENTITIES,
    DEFAULT_LOCATIONS,
)
from app.modules.access_sentinel.domain.entities import Identity, Location
from app.modules.access_sentinel.domain.exceptions import ReferenceDataMissingError


class ReferenceRegistry:
    """Read-only lookup of locations and identities by id

    Catalog order is preserved; it drives the order of per-identity results.
    """

    def __init__(self, locations: Iterable[Location], identities: Iterable[Identity]):
        self._locations = MappingProxyType({loc.id: loc for loc in locations})
        self._identities = MappingProxyType({ident.id: ident for ident in identities})

    @classmethod
    def default(cls) -> "ReferenceRegistry":
        return cls(DEFAULT_LOCATIONS, DEFAULT_IDENTITIES)

    @classmethod
    def from_records(
        cls, locations: Iterable[dict[str, Any]], identities: Iterable[dict[str, Any]]
    ) -> "ReferenceRegistry":
        """Build a registry from plain dicts (snake_case or camelCase keys)"""
        return cls(
            [Location.model_validate(record) for record in locations],
            [Identity.model_validate(record) for record in identities],
        )

    @property
    def locations(self) -> list[Location]:
        return list(self._locations.values())

    @property
    def identities(self) -> list[Identity]:
        return list(self._identities.values())

    def get_location(self, location_id: str) -> Location | None:
        return self._locations.get(location_id)

    def get_identity(self, identity_id: str) -> Identity | None:
        return self._identities.get(identity_id)

    def require_location(self, location_id: str) -> Location:
        location = self._locations.get(location_id)
        if location is None:
            raise ReferenceDataMissingError("location", location_id)
        return location

    def location_name(self, location_id: str) -> str:
        location = self._locations.get(location_id)
        return location.name if location else location_id

    def identity_name(self, identity_id: str) -> str:
        identity = self._identities.get(identity_id)
        return identity.name if identity else identity_id
