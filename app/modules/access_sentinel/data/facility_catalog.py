# -*- coding: utf-8 -*-
"""
facility_catalog.py — Default hospital campus reference data
-----------------------------------------------------------
Access points with simulated GPS coordinates and the badge holders
the synthetic log source draws from.
"""
from app.modules.access_sentinel.domain.entities import Coordinates, Identity, Location


def _location(id: str, name: str, lat: float, lng: float, floor: int, building: str) -> Location:
    return Location(
        id=id,
        name=name,
        coordinates=Coordinates(lat=lat, lng=lng),
        floor=floor,
        building=building,
    )


DEFAULT_LOCATIONS: tuple[Location, ...] = (
    _location("icu", "ICU", 28.6139, 77.2090, 3, "Main"),
    _location("pharmacy", "Pharmacy", 28.6145, 77.2095, 1, "Main"),
    _location("reception", "Reception", 28.6135, 77.2088, 0, "Main"),
    _location("emergency", "Emergency Ward", 28.6150, 77.2100, 0, "East Wing"),
    _location("ot", "Operation Theatre", 28.6142, 77.2082, 4, "Main"),
    _location("radiology", "Radiology", 28.6148, 77.2078, 2, "West Wing"),
    _location("lab", "Pathology Lab", 28.6132, 77.2092, 1, "Main"),
    _location("cardiology", "Cardiology", 28.6155, 77.2085, 5, "East Wing"),
)

DEFAULT_IDENTITIES: tuple[Identity, ...] = (
    Identity(id="1", name="Dr. Rahul Sharma", role="Senior Surgeon", department="Surgery", badge_id="MED-001"),
    Identity(id="2", name="Dr. Priya Patel", role="Cardiologist", department="Cardiology", badge_id="MED-002"),
    Identity(id="3", name="Dr. Aman Singh", role="Emergency Physician", department="Emergency", badge_id="MED-003"),
    Identity(id="4", name="Dr. Neha Gupta", role="Anesthesiologist", department="Surgery", badge_id="MED-004"),
    Identity(id="5", name="Dr. Vikram Rao", role="Radiologist", department="Radiology", badge_id="MED-005"),
    Identity(id="6", name="Nurse Sunita", role="Head Nurse", department="ICU", badge_id="NRS-001"),
    Identity(id="7", name="Dr. Anjali Mehta", role="Pathologist", department="Laboratory", badge_id="MED-006"),
    Identity(id="8", name="Dr. Karan Malhotra", role="Neurosurgeon", department="Surgery", badge_id="MED-007"),
)
