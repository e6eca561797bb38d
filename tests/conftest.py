"""Shared fixtures: catalog builders and seeded random sources."""
import random

import pytest
import structlog

from lifttrax.config.wave_policy import CatalogRequirements
from lifttrax.models.enums import ExerciseRegion, MovementPattern, Muscle
from lifttrax.models.exercise import Exercise
from lifttrax.repositories.catalog_repository import InMemoryExerciseCatalog

LOWER_ACCESSORY_MUSCLES = {Muscle.HAMSTRING, Muscle.QUAD, Muscle.CALF}

MAIN_PATTERN_REGIONS = {
    MovementPattern.SQUAT: ExerciseRegion.LOWER,
    MovementPattern.DEADLIFT: ExerciseRegion.LOWER,
    MovementPattern.BENCH_PRESS: ExerciseRegion.UPPER,
    MovementPattern.OVERHEAD_PRESS: ExerciseRegion.UPPER,
}


def main_lifts(pattern: MovementPattern, count: int, canonical: bool = True) -> list[Exercise]:
    """``count`` variations of a main pattern, the first being the canonical lift."""
    base = CatalogRequirements.CANONICAL_NAMES[pattern]
    region = MAIN_PATTERN_REGIONS[pattern]
    names = [f"{base} Variation {i}" for i in range(1, count + 1)]
    if canonical and names:
        names[0] = base
    return [Exercise.create(name, region, pattern) for name in names]


def build_catalog(
    *,
    squats: int = 4,
    deadlifts: int = 4,
    benches: int = 4,
    overheads: int = 4,
    canonical: bool = True,
    accessories_per_muscle: int = 2,
    cores: int = 3,
    forearms: int = 1,
    skip_muscles: tuple = (),
    mobility_per_region: int = 2,
    conditioning: int = 3,
) -> InMemoryExerciseCatalog:
    """Build a synthetic catalog with controllable variety."""
    exercises: list[Exercise] = []
    counts = {
        MovementPattern.SQUAT: squats,
        MovementPattern.DEADLIFT: deadlifts,
        MovementPattern.BENCH_PRESS: benches,
        MovementPattern.OVERHEAD_PRESS: overheads,
    }
    for pattern, count in counts.items():
        exercises += main_lifts(pattern, count, canonical=canonical)

    for muscle in CatalogRequirements.REQUIRED_ACCESSORY_MUSCLES:
        if muscle in skip_muscles or muscle == Muscle.CORE:
            continue
        region = ExerciseRegion.LOWER if muscle in LOWER_ACCESSORY_MUSCLES else ExerciseRegion.UPPER
        exercises += [
            Exercise.create(f"{muscle.value} accessory {i}", region, MovementPattern.ACCESSORY, [muscle])
            for i in range(1, accessories_per_muscle + 1)
        ]

    if Muscle.CORE not in skip_muscles:
        exercises += [
            Exercise.create(f"core accessory {i}", ExerciseRegion.LOWER, MovementPattern.ACCESSORY, [Muscle.CORE])
            for i in range(1, cores + 1)
        ]
    exercises += [
        Exercise.create(f"forearm accessory {i}", ExerciseRegion.UPPER, MovementPattern.ACCESSORY, [Muscle.FOREARM])
        for i in range(1, forearms + 1)
    ]

    for region in ExerciseRegion:
        exercises += [
            Exercise.create(f"{region.value} mobility {i}", region, MovementPattern.MOBILITY)
            for i in range(1, mobility_per_region + 1)
        ]
    exercises += [
        Exercise.create(f"conditioning {i}", ExerciseRegion.LOWER, MovementPattern.CONDITIONING)
        for i in range(1, conditioning + 1)
    ]
    return InMemoryExerciseCatalog(exercises)


@pytest.fixture
def catalog() -> InMemoryExerciseCatalog:
    return build_catalog()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def make_catalog():
    """Factory fixture exposing ``build_catalog`` to tests."""
    return build_catalog


@pytest.fixture(autouse=True)
def reset_structlog():
    """Drop logging configuration bound to per-test capture streams."""
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
