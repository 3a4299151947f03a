"""Minimum travel time between two access points"""

import math

from app.modules.access_sentinel.config import TravelTimeModel
from app.modules.access_sentinel.domain.entities import Location


class TravelTimeEstimator:
    """Walking time plus floor and building change penalties"""

    EARTH_RADIUS_M = 6371000.0

    def __init__(self, model: TravelTimeModel | None = None):
        self.model = model or TravelTimeModel()

    @classmethod
    def distance_m(cls, origin: Location, destination: Location) -> float:
        """Great-circle distance between the two access points in meters"""
        lat1, lat2 = math.radians(origin.coordinates.lat), math.radians(destination.coordinates.lat)
        dlat = lat2 - lat1
        dlng = math.radians(destination.coordinates.lng - origin.coordinates.lng)

        a = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlng / 2) ** 2
        return 2 * cls.EARTH_RADIUS_M * math.asin(min(1.0, math.sqrt(a)))

    def floor_time(self, origin: Location, destination: Location) -> float:
        return abs(destination.floor - origin.floor) * self.model.floor_change_minutes

    def building_penalty(self, origin: Location, destination: Location) -> float:
        if origin.building != destination.building:
            return self.model.building_change_minutes
        return 0.0

    def required_time(self, origin: Location, destination: Location) -> float:
        """Minimum minutes needed to walk from origin to destination"""
        walking_time = self.distance_m(origin, destination) / self.model.walking_speed_m_per_min
        return (
            walking_time
            + self.floor_time(origin, destination)
            + self.building_penalty(origin, destination)
        )
