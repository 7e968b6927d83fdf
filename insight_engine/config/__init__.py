"""Insight engine config"""

from .settings import settings, InsightSettings

__all__ = ["settings", "InsightSettings"]
