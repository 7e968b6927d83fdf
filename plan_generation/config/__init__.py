"""Plan generation config"""

from .settings import settings, PlanGenerationSettings

__all__ = ["settings", "PlanGenerationSettings"]
