"""Progress tracking config"""

from .settings import settings, ProgressSettings

__all__ = ["settings", "ProgressSettings"]
