"""Wave generation services."""
from lifttrax.services.hypertrophy_generator import HypertrophyWaveGenerator, generate_hypertrophy_wave
from lifttrax.services.overrides import DefaultSelectionResolver, SelectionResolver
from lifttrax.services.programs import generate_program_wave
from lifttrax.services.wave_generator import ConjugateWaveGenerator, generate_wave
from lifttrax.services.wave_markdown import render_wave_markdown

__all__ = [
    "ConjugateWaveGenerator",
    "DefaultSelectionResolver",
    "HypertrophyWaveGenerator",
    "SelectionResolver",
    "generate_hypertrophy_wave",
    "generate_program_wave",
    "generate_wave",
    "render_wave_markdown",
]
