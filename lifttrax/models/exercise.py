"""Catalog exercise model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from lifttrax.models.enums import ExerciseRegion, MovementPattern, Muscle


def normalize_name(name: str) -> str:
    """Return the identity key for an exercise name.

    Names are compared case-insensitively with surrounding whitespace
    stripped, so ``" bench press"`` and ``"Bench Press"`` are the same lift.
    """
    return " ".join(name.split()).casefold()


@dataclass(frozen=True)
class Exercise:
    """A movement in the exercise catalog.

    Exercises are uniquely identified by their normalized name. The generator
    treats them as read-only values: it queries by pattern, region and muscle
    but never creates, renames or deletes them.

    Attributes:
        name: Display name, e.g. "Safety Bar Squat"
        region: Whether this is an upper- or lower-body movement
        pattern: Optional primary movement-pattern tag
        muscles: Muscles primarily targeted (unordered, deduplicated)
        notes: Free-form coaching notes
    """

    name: str
    region: ExerciseRegion
    pattern: MovementPattern | None = None
    muscles: frozenset[Muscle] = field(default_factory=frozenset)
    notes: str = ""

    def __post_init__(self) -> None:
        cleaned = " ".join(self.name.split())
        if not cleaned:
            raise ValueError("exercise name must not be blank")
        object.__setattr__(self, "name", cleaned)
        if not isinstance(self.muscles, frozenset):
            object.__setattr__(self, "muscles", frozenset(self.muscles))

    @classmethod
    def create(
        cls,
        name: str,
        region: str | ExerciseRegion,
        pattern: str | MovementPattern | None = None,
        muscles: Iterable[str | Muscle] = (),
        notes: str = "",
    ) -> Exercise:
        """Build an exercise from loosely typed values (YAML, CLI, tests)."""
        return cls(
            name=name,
            region=ExerciseRegion.parse(region),
            pattern=MovementPattern.parse(pattern),
            muscles=frozenset(Muscle.parse(m) for m in muscles),
            notes=notes or "",
        )

    @property
    def key(self) -> str:
        return normalize_name(self.name)

    def targets(self, muscle: Muscle) -> bool:
        return muscle in self.muscles

    def targets_any(self, muscles: Iterable[Muscle]) -> bool:
        return not self.muscles.isdisjoint(muscles)
