"""Shared CLI utilities."""

import asyncio
from functools import wraps

import click

from ..config import get_settings
from ..db.repositories import UserProfileRepository
from ..models.user_profile import UserProfile
from ..models.workout import Workout


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def ensure_initialized(ctx: click.Context) -> None:
    """Ensure the database is initialized."""
    if not get_settings().db_path.exists():
        click.echo(
            click.style("Error: ", fg="red")
            + "Project not initialized. Run 'pulse-coach init' first."
        )
        ctx.exit(1)


async def load_profile(ctx: click.Context, user_id: str | None) -> UserProfile:
    """Load the given profile, or the newest one when no id is given."""
    repo = UserProfileRepository()
    profile = await repo.get(user_id) if user_id else await repo.get_latest()
    if profile is None:
        if user_id:
            echo_error(f"Profile {user_id} not found.")
        else:
            echo_error("No profile yet. Run 'pulse-coach profile create' first.")
        ctx.exit(1)
    return profile


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    # Calculate column widths
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = [
        "".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers)),
        "".join("-" * w + " " * padding for w in widths),
    ]
    for row in rows:
        lines.append("".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row)))

    return "\n".join(lines)


def format_workout(workout: Workout, names: dict[str, str] | None = None) -> str:
    """Render a workout's plan as a table."""
    names = names or {}
    done = {e.exercise_id for e in workout.completed_exercises}
    rows = []
    for i, entry in enumerate(workout.planned_exercises, 1):
        if entry.sets is not None and entry.reps is not None:
            target = f"{entry.sets}x{entry.reps}"
            if entry.weight:
                target += f" @ {entry.weight:g}"
        elif entry.duration_seconds is not None:
            target = f"{entry.duration_seconds}s"
        else:
            target = "-"
        rows.append(
            [
                str(i),
                names.get(entry.exercise_id, entry.exercise_id),
                target,
                f"{entry.rest_seconds}s" if entry.rest_seconds is not None else "-",
                "yes" if entry.exercise_id in done else "",
            ]
        )

    header = (
        f"Workout {workout.id} ({workout.date.isoformat()}) - "
        f"difficulty {workout.difficulty_score}/10, "
        f"{workout.completion_rate:.0%} complete"
    )
    table = format_table(["#", "Exercise", "Target", "Rest", "Done"], rows)
    return header + ("\n\n" + table if table else "\n\nNo exercises planned.")
