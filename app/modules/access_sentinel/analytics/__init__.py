"""Behavioral pattern analytics"""

from app.modules.access_sentinel.analytics.facade import BehaviorPatternEngine

__all__ = ["BehaviorPatternEngine"]
