"""
CLI tool for generating conjugate and hypertrophy training waves.

Usage examples:
    # Generate the default number of weeks as Markdown
    python -m scripts.tools.wave_cli generate --output wave.md

    # Four-day hypertrophy wave
    python -m scripts.tools.wave_cli generate --weeks 4 --program hypertrophy --output wave.md

    # Reproducible 4-week wave from a specific catalog, as JSON
    python -m scripts.tools.wave_cli generate \\
        --catalog data/exercise_catalog.yaml \\
        --weeks 4 --seed 42 --json --output wave.json

    # Pick main and speed-work lifts at the terminal before generation
    python -m scripts.tools.wave_cli generate --weeks 6 --interactive --output wave.md

    # List the catalog grouped by movement pattern
    python -m scripts.tools.wave_cli list
"""
import argparse
import random
import sys
from typing import Callable, Sequence, TextIO

from lifttrax.config.settings import get_settings
from lifttrax.core.exceptions import DomainError
from lifttrax.core.logging import configure_logging
from lifttrax.models.enums import MovementPattern, WaveProgram
from lifttrax.models.exercise import Exercise
from lifttrax.repositories.yaml_catalog import load_catalog
from lifttrax.schemas import WaveResponse
from lifttrax.services.overrides import DefaultSelectionResolver, SelectionResolver
from lifttrax.services.programs import generate_program_wave
from lifttrax.services.wave_markdown import render_wave_markdown


class PromptSelectionResolver:
    """Asks at the terminal whether to replace each default selection.

    An empty answer keeps the default; a number picks that option. Anything
    else keeps the default after a short notice. Menus go to stderr so that
    `--output -` leaves stdout to the wave itself.
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] | None = None,
        output: TextIO | None = None,
    ):
        self._input = input_fn or input
        self._output = output or sys.stderr

    def _choose(self, label: str, default: Exercise, options: Sequence[Exercise]) -> Exercise:
        print(f"\n{label} [default: {default.name}]", file=self._output)
        for number, option in enumerate(options, start=1):
            marker = "*" if option.key == default.key else " "
            print(f"  {marker}{number:>2}. {option.name}", file=self._output)

        print("Choice (Enter keeps default): ", end="", file=self._output, flush=True)
        answer = self._input("").strip()
        if not answer:
            return default
        if answer.isdigit() and 1 <= int(answer) <= len(options):
            return options[int(answer) - 1]
        print(f"  Unrecognized choice '{answer}', keeping {default.name}", file=self._output)
        return default

    def resolve(
        self,
        defaults: Sequence[Exercise],
        alternatives: Sequence[Sequence[Exercise]],
        labels: Sequence[str] | None = None,
    ) -> list[Exercise]:
        labels = labels or [f"Slot {i + 1}" for i in range(len(defaults))]
        return [
            self._choose(label, default, options)
            for label, default, options in zip(labels, defaults, alternatives)
        ]


def build_resolver(interactive: bool, headless: bool) -> SelectionResolver:
    """Prompt only when asked to and a terminal is expected."""
    if interactive and not headless:
        return PromptSelectionResolver()
    return DefaultSelectionResolver()


def generate_command(args) -> int:
    """Handle generate command."""
    settings = get_settings()
    catalog = load_catalog(args.catalog or settings.resolved_catalog_path())
    weeks = args.weeks if args.weeks is not None else settings.default_week_count
    if weeks > settings.max_week_count:
        print(f"❌ At most {settings.max_week_count} weeks can be generated", file=sys.stderr)
        return 1

    rng = random.Random(args.seed) if args.seed is not None else None
    program = WaveProgram(args.program)
    wave = generate_program_wave(
        program,
        weeks,
        catalog,
        rng=rng,
        resolver=build_resolver(args.interactive, settings.headless),
    )

    if args.json:
        content = WaveResponse.from_wave(wave, program).model_dump_json(indent=2) + "\n"
    else:
        content = "\n".join(render_wave_markdown(wave))

    if args.output == "-":
        sys.stdout.write(content)
    else:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(content)
        print(f"✅ Wrote {len(wave)}-week wave to {args.output}")
    return 0


def list_command(args) -> int:
    """Handle list command."""
    settings = get_settings()
    catalog = load_catalog(args.catalog or settings.resolved_catalog_path())
    exercises = catalog.list_exercises()

    print(f"\n=== Exercises ({len(exercises)}) ===")
    for pattern in [*MovementPattern, None]:
        group = [e for e in exercises if e.pattern == pattern]
        if not group:
            continue
        print(f"\n{pattern.label if pattern else 'Untagged'}:")
        for exercise in group:
            muscles = ", ".join(sorted(m.value for m in exercise.muscles))
            suffix = f" [{muscles}]" if muscles else ""
            print(f"  {exercise.name} ({exercise.region.value}){suffix}")
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Conjugate Wave Generator CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate a wave as Markdown
  python -m scripts.tools.wave_cli generate --weeks 7 --output wave.md

  # Generate JSON to stdout
  python -m scripts.tools.wave_cli generate --weeks 4 --json --output -

  # List all exercises
  python -m scripts.tools.wave_cli list --catalog data/exercise_catalog.yaml
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # generate command
    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate a conjugate or hypertrophy wave"
    )
    generate_parser.add_argument(
        "--catalog", "-c",
        help="YAML exercise catalog (defaults to the configured catalog_path)"
    )
    generate_parser.add_argument(
        "--weeks", "-w",
        type=int,
        help="Number of weeks (defaults to the configured default_week_count)"
    )
    generate_parser.add_argument(
        "--output", "-o",
        required=True,
        help="Output file, or '-' for stdout"
    )
    generate_parser.add_argument(
        "--program", "-p",
        choices=[p.value for p in WaveProgram],
        default=WaveProgram.CONJUGATE.value,
        help="Training program (default: conjugate)"
    )
    generate_parser.add_argument(
        "--seed", "-s",
        type=int,
        help="Random seed for a reproducible wave"
    )
    generate_parser.add_argument(
        "--interactive", "-i",
        action="store_true",
        help="Review main and speed-work lifts before a conjugate wave is generated"
    )
    generate_parser.add_argument(
        "--json",
        action="store_true",
        help="Write JSON instead of Markdown"
    )
    generate_parser.set_defaults(func=generate_command)

    # list command
    list_parser = subparsers.add_parser(
        "list",
        help="List all exercises in the catalog"
    )
    list_parser.add_argument(
        "--catalog", "-c",
        help="YAML exercise catalog (defaults to the configured catalog_path)"
    )
    list_parser.set_defaults(func=list_command)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "generate" and args.weeks is not None and args.weeks < 1:
        parser.error("--weeks must be at least 1")

    configure_logging(stream=sys.stderr)
    try:
        return args.func(args)
    except DomainError as e:
        print(f"❌ {e.message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
