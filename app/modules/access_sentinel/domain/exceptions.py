"""Domain errors for access anomaly detection"""


class AccessSentinelError(Exception):
    """Base class for every error raised by the access sentinel module"""


class ReferenceDataMissingError(AccessSentinelError):
    """An event references a location or identity absent from the registry"""

    def __init__(self, kind: str, reference_id: str):
        self.kind = kind
        self.reference_id = reference_id
        super().__init__(f"Unknown {kind} id: {reference_id}")


class InvalidIntervalError(AccessSentinelError):
    """Time gap between two accesses falls outside the analysis window"""

    def __init__(self, gap_minutes: float, max_gap_minutes: float):
        self.gap_minutes = gap_minutes
        self.max_gap_minutes = max_gap_minutes
        super().__init__(
            f"Gap of {gap_minutes:.2f} min outside (0, {max_gap_minutes:.0f}] window"
        )


class ConfigOutOfRangeError(AccessSentinelError):
    """A configuration change was rejected; the previous configuration stays active"""

    def __init__(self, message: str, errors: list[dict] | None = None):
        self.errors = errors or []
        super().__init__(message)


class EventSourceError(AccessSentinelError):
    """The access log source could not be read"""
