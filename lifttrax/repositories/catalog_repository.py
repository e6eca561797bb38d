"""Read-only exercise catalog queries consumed by the wave generator."""

from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable

from lifttrax.core.exceptions import ConflictError, NotFoundError
from lifttrax.models.enums import ExerciseRegion, MovementPattern, Muscle
from lifttrax.models.exercise import Exercise, normalize_name


@runtime_checkable
class ExerciseCatalog(Protocol):
    """Query interface over an exercise catalog.

    Every query returns exercises sorted by name so that the generator's
    random source, not storage order, determines variety.
    """

    def exercises_by_pattern(self, pattern: MovementPattern) -> list[Exercise]:
        ...

    def exercises_by_region_and_pattern(
        self, region: ExerciseRegion, pattern: MovementPattern
    ) -> list[Exercise]:
        ...

    def accessories_by_muscle(self, muscle: Muscle) -> list[Exercise]:
        ...

    def get_exercise(self, name: str) -> Exercise:
        """Look up one exercise by exact (normalized) name.

        Raises:
            NotFoundError: No exercise has this name
            ConflictError: More than one exercise matches
        """
        ...

    def list_exercises(self) -> list[Exercise]:
        ...


class InMemoryExerciseCatalog:
    """Catalog snapshot held in memory.

    Used by the YAML loader, the CLI and tests. Names must be unique after
    normalization.
    """

    def __init__(self, exercises: Iterable[Exercise] = ()):
        self._by_key: dict[str, Exercise] = {}
        for exercise in exercises:
            self.add(exercise)

    def add(self, exercise: Exercise) -> None:
        if exercise.key in self._by_key:
            raise ConflictError(
                f"duplicate exercise name '{exercise.name}'",
                code="CF_EXERCISE_EXISTS",
                details={"name": exercise.name},
            )
        self._by_key[exercise.key] = exercise

    def __len__(self) -> int:
        return len(self._by_key)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_name(name) in self._by_key

    def _sorted(self, exercises: Iterable[Exercise]) -> list[Exercise]:
        return sorted(exercises, key=lambda e: (e.key, e.name))

    def exercises_by_pattern(self, pattern: MovementPattern) -> list[Exercise]:
        return self._sorted(e for e in self._by_key.values() if e.pattern == pattern)

    def exercises_by_region_and_pattern(
        self, region: ExerciseRegion, pattern: MovementPattern
    ) -> list[Exercise]:
        return self._sorted(
            e for e in self._by_key.values() if e.region == region and e.pattern == pattern
        )

    def accessories_by_muscle(self, muscle: Muscle) -> list[Exercise]:
        return self._sorted(
            e
            for e in self._by_key.values()
            if e.pattern == MovementPattern.ACCESSORY and e.targets(muscle)
        )

    def get_exercise(self, name: str) -> Exercise:
        matches = [e for e in self._by_key.values() if e.key == normalize_name(name)]
        if not matches:
            raise NotFoundError("exercise", f"exercise '{name}' not found", {"name": name})
        if len(matches) > 1:
            raise ConflictError(
                f"exercise name '{name}' is ambiguous",
                code="CF_EXERCISE_AMBIGUOUS",
                details={"name": name, "matches": [e.name for e in matches]},
            )
        return matches[0]

    def list_exercises(self) -> list[Exercise]:
        return self._sorted(self._by_key.values())
