"""Wave generation endpoints."""
import random

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from lifttrax.api.routes.dependencies import get_catalog
from lifttrax.config.settings import Settings, get_settings
from lifttrax.core.exceptions import ValidationError
from lifttrax.core.logging import get_logger
from lifttrax.models.workout import Wave
from lifttrax.repositories.catalog_repository import ExerciseCatalog
from lifttrax.schemas import APIResponse, ResponseMeta, WaveRequest, WaveResponse
from lifttrax.services.overrides import DefaultSelectionResolver
from lifttrax.services.programs import generate_program_wave
from lifttrax.services.wave_markdown import render_wave_markdown

router = APIRouter()
logger = get_logger(__name__)


def _generate(request: WaveRequest, catalog: ExerciseCatalog, settings: Settings) -> Wave:
    week_count = request.weeks if request.weeks is not None else settings.default_week_count
    if week_count > settings.max_week_count:
        raise ValidationError(
            "weeks", f"at most {settings.max_week_count} weeks can be generated, got {week_count}"
        )

    rng = random.Random(request.seed) if request.seed is not None else None
    logger.info(
        "wave_requested",
        program=request.program.value,
        weeks=week_count,
        seeded=request.seed is not None,
    )
    # No interactive pickers over HTTP
    return generate_program_wave(
        request.program, week_count, catalog, rng=rng, resolver=DefaultSelectionResolver()
    )


@router.post("", response_model=APIResponse[WaveResponse])
def create_wave(
    request: WaveRequest,
    catalog: ExerciseCatalog = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
):
    """
    Generate a conjugate or hypertrophy wave.

    Returns the wave as structured JSON inside the standard response envelope.
    Catalog shortages surface as 422 errors with a ``GEN_*`` code.
    """
    wave = _generate(request, catalog, settings)
    return APIResponse[WaveResponse](data=WaveResponse.from_wave(wave, request.program), meta=ResponseMeta())


@router.post("/markdown", response_class=PlainTextResponse)
def create_wave_markdown(
    request: WaveRequest,
    catalog: ExerciseCatalog = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
):
    """Generate a wave rendered as Markdown."""
    wave = _generate(request, catalog, settings)
    return PlainTextResponse("\n".join(render_wave_markdown(wave)), media_type="text/markdown")
