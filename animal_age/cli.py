"""Command-line entry point: convert animal age to human years."""

import json
import logging
import shutil
import sys

import click

from animal_age.config import VERSION, settings
from animal_age.db.registry import get_registry
from animal_age.errors import AnimalAgeError
from animal_age.models.conversion import RenderMode
from animal_age.services.batch_service import process
from animal_age.services.render_service import overage_warning

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.WARNING,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)

EPILOG = """\b
Examples:
    animal-age -t cat -a 3
    animal-age --type small_dog --age 5
    animal-age --list
    animal-age -t horse -a 10 --json
    animal-age -t cat,small_dog -a 3 --no-color
"""


def split_types(values: tuple[str, ...]) -> list[str]:
    """Flatten repeated and comma-separated --type values, keeping order."""
    keys = []
    for value in values:
        keys.extend(part for part in value.split(",") if part.strip())
    return keys


def list_animals() -> None:
    click.echo("Available animals:\n")
    for profile in get_registry().profiles():
        click.echo(f"  {profile.key:12} - {profile.description}")


def _fail(message: str, color_enabled: bool) -> None:
    click.echo(click.style(message, fg="red") if color_enabled else message, err=True)


def _warn(message: str | None, color_enabled: bool) -> None:
    if message:
        click.echo(click.style(message, fg="yellow") if color_enabled else message, err=True)


@click.command(epilog=EPILOG)
@click.option(
    "-t",
    "--type",
    "animal_types",
    multiple=True,
    metavar="ANIMAL",
    help="Animal type (use --list to show valid options, supports comma-separated list)",
)
@click.option("-a", "--age", type=float, metavar="YEARS", help="Age of the animal in real years")
@click.option("--list", "show_list", is_flag=True, help="Show supported animal types")
@click.option("--json", "as_json", is_flag=True, help="Output in JSON format")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.version_option(VERSION, prog_name="animal-age")
def main(
    animal_types: tuple[str, ...],
    age: float | None,
    show_list: bool,
    as_json: bool,
    no_color: bool,
) -> None:
    """Convert animal age to human years & show colorful lifespan comparisons."""
    if show_list:
        list_animals()
        return

    if not animal_types or age is None:
        raise click.UsageError("Missing required arguments: --type and --age")

    color_enabled = not no_color
    mode = RenderMode.STRUCTURED if as_json else RenderMode.BAR
    keys = split_types(animal_types)

    try:
        outcomes = process(
            keys,
            age,
            mode=mode,
            color_enabled=color_enabled,
            columns=shutil.get_terminal_size().columns,
        )
    except AnimalAgeError as e:
        logger.debug("Batch rejected: %s", e)
        _fail(f"Error: {e}", color_enabled)
        sys.exit(1)

    for outcome in outcomes:
        if not outcome.ok:
            _fail(outcome.error, color_enabled)
        elif as_json:
            # Bar output carries the warning inline
            _warn(overage_warning(outcome.result), color_enabled)

    rendered = [outcome.output for outcome in outcomes if outcome.ok]
    if as_json:
        if len(keys) == 1 and rendered:
            click.echo(json.dumps(rendered[0], indent=2, allow_nan=False))
        elif len(keys) > 1:
            click.echo(json.dumps(rendered, indent=2, allow_nan=False))
    elif rendered:
        if len(rendered) > 1:
            click.echo("Life Progress:\n")
        click.echo("\n\n".join(rendered))

    if not all(outcome.ok for outcome in outcomes):
        sys.exit(1)


if __name__ == "__main__":
    main()
