from app.modules.access_sentinel.application.services import (
    AccessSentinelService,
    SentinelSnapshot,
)

__all__ = ["AccessSentinelService", "SentinelSnapshot"]
