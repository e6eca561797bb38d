"""Program dispatch for wave generation."""

from __future__ import annotations

import random

from lifttrax.models.enums import WaveProgram
from lifttrax.models.workout import Wave
from lifttrax.repositories.catalog_repository import ExerciseCatalog
from lifttrax.services.hypertrophy_generator import generate_hypertrophy_wave
from lifttrax.services.overrides import SelectionResolver
from lifttrax.services.wave_generator import generate_wave


def generate_program_wave(
    program: WaveProgram,
    week_count: int,
    catalog: ExerciseCatalog,
    *,
    rng: random.Random | None = None,
    resolver: SelectionResolver | None = None,
) -> Wave:
    """Generate a wave for ``program``.

    Only conjugate waves have overridable selections; ``resolver`` is not
    consulted for hypertrophy waves.
    """
    if program == WaveProgram.HYPERTROPHY:
        return generate_hypertrophy_wave(week_count, catalog, rng=rng)
    return generate_wave(week_count, catalog, rng=rng, resolver=resolver)
