"""Initialize project command."""

from pathlib import Path

import click

from ..config import get_settings
from ..data.exercise_loader import load_exercises_from_json
from ..db import init_db, seed_exercises
from .base import async_command, echo_info, echo_success, echo_warning


@click.command()
@click.option(
    "--catalog",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON exercise catalog to seed instead of the built-in one",
)
@async_command
async def init(catalog: Path | None):
    """Initialize the pulse-coach database.

    Creates the data directory and the SQLite schema, then seeds the
    exercise catalog.
    """
    settings = get_settings()
    data_dir = settings.data_dir
    echo_info(f"Initializing pulse-coach in {data_dir}")

    data_dir.mkdir(parents=True, exist_ok=True)
    await init_db(settings.db_path)
    echo_success("Database initialized")

    if catalog is not None:
        exercises = load_exercises_from_json(catalog)
        if not exercises:
            echo_warning(f"No valid exercises found in {catalog}")
        count = await seed_exercises(settings.db_path, exercises)
        echo_success(f"Exercise catalog populated ({count} exercises from {catalog.name})")
    else:
        count = await seed_exercises(settings.db_path)
        echo_success(f"Exercise catalog populated ({count} built-in exercises)")

    click.echo()
    click.echo("pulse-coach is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Create your profile:")
    click.echo("     pulse-coach profile create")
    click.echo()
    click.echo("  2. Get today's workout:")
    click.echo("     pulse-coach workout today")
