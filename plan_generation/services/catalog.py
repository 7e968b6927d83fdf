"""Exercise catalog

Read-only collection loaded once per instance from a versioned JSON
document:

    {"version": "1.0.0", "exercises": [{...}, ...]}

Catalog order is part of the contract: it breaks ranking ties, and
plans record the catalog version they were built from.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from shared.models import ExerciseRecord, FocusArea
from plan_generation.config import settings
from plan_generation.models import MicroSession

logger = logging.getLogger(__name__)


class ExerciseCatalog:
    """Versioned exercise catalog"""

    def __init__(
        self,
        path: Optional[Path] = None,
        exercises: Optional[List[ExerciseRecord]] = None,
        version: str = "",
    ):
        """
        Args:
            path: catalog JSON path (default: settings.catalog_path)
            exercises: in-memory records, skips file loading when given
            version: version label for in-memory catalogs
        """
        if exercises is not None:
            self._version = version or "inline"
            self._exercises = list(exercises)
        else:
            self._version, self._exercises = self._load(Path(path or settings.catalog_path))

        self._by_id: Dict[str, ExerciseRecord] = {}
        self._positions: Dict[str, int] = {}
        self._ordered: List[ExerciseRecord] = []
        for exercise in self._exercises:
            if exercise.id in self._by_id:
                logger.warning(f"Duplicate exercise id '{exercise.id}' ignored")
                continue
            self._by_id[exercise.id] = exercise
            self._positions[exercise.id] = len(self._ordered)
            self._ordered.append(exercise)

        logger.info(f"Exercise catalog {self._version}: {len(self._by_id)} exercises")

    @staticmethod
    def _load(path: Path):
        if not path.exists():
            raise FileNotFoundError(f"Exercise catalog not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            raw_data = json.load(f)

        version = str(raw_data.get("version", "unversioned"))
        exercises = [ExerciseRecord.model_validate(item) for item in raw_data.get("exercises", [])]
        return version, exercises

    @property
    def version(self) -> str:
        return self._version

    def __len__(self) -> int:
        return len(self._by_id)

    def all(self) -> List[ExerciseRecord]:
        """All exercises in catalog order"""
        return list(self._ordered)

    def get(self, exercise_id: str) -> Optional[ExerciseRecord]:
        return self._by_id.get(exercise_id)

    def get_many(self, exercise_ids: Iterable[str]) -> List[ExerciseRecord]:
        """Resolve ids in order, unknown ids are skipped"""
        resolved = []
        for exercise_id in exercise_ids:
            exercise = self._by_id.get(exercise_id)
            if exercise is None:
                logger.debug(f"Exercise '{exercise_id}' not in catalog {self._version}")
                continue
            resolved.append(exercise)
        return resolved

    def for_focus_areas(self, focus_areas: Iterable[FocusArea]) -> List[ExerciseRecord]:
        """Exercises touching any of the given areas, catalog order"""
        wanted = set(focus_areas)
        return [ex for ex in self.all() if wanted.intersection(ex.focus_areas)]

    def resolve(self, session: MicroSession) -> List[ExerciseRecord]:
        """Resolved exercises of a session (may be shorter than its id list)"""
        return self.get_many(session.exercise_ids)

    def resolved_duration_seconds(self, session: MicroSession) -> int:
        return sum(ex.duration_seconds for ex in self.resolve(session))

    def position(self, exercise_id: str) -> int:
        """Catalog position, unknown ids sort last"""
        return self._positions.get(exercise_id, len(self._ordered))
