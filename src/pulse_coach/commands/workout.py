"""Daily workout commands."""

import click

from ..config import get_settings
from ..db.repositories import ExerciseRepository
from ..exceptions import WorkoutNotFoundError
from ..models.workout import WorkoutExercise
from ..services.workouts import WorkoutService
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
    format_workout,
    load_profile,
)


async def _exercise_names() -> dict[str, str]:
    return {e.id: e.name for e in await ExerciseRepository().get_all()}


@click.group()
def workout():
    """Get, complete and review workouts."""
    pass


@workout.command("today")
@click.option("--user", "user_id", help="Profile id (defaults to the newest)")
@click.option("--minutes", "-m", type=int, help="Target session length in minutes")
@click.pass_context
@async_command
async def today(ctx: click.Context, user_id: str | None, minutes: int | None):
    """Show today's workout, generating it if needed."""
    ensure_initialized(ctx)
    settings = get_settings()
    user = await load_profile(ctx, user_id)

    service = WorkoutService()
    workout = await service.generate_todays_workout(
        user,
        target_duration_minutes=minutes or settings.default_target_minutes,
        history_days=settings.history_days,
    )

    click.echo()
    click.echo(format_workout(workout, await _exercise_names()))


@workout.command("complete")
@click.argument("workout_id")
@click.argument("exercise_id")
@click.option("--sets", type=int, help="Sets performed")
@click.option("--reps", type=int, help="Reps performed")
@click.option("--weight", type=float, help="Weight used")
@click.option("--duration", type=int, help="Seconds performed")
@click.option("--rpe", type=click.IntRange(1, 10), help="Perceived difficulty 1-10")
@click.pass_context
@async_command
async def complete(
    ctx: click.Context,
    workout_id: str,
    exercise_id: str,
    sets: int | None,
    reps: int | None,
    weight: float | None,
    duration: int | None,
    rpe: int | None,
):
    """Record a completed exercise in a workout."""
    ensure_initialized(ctx)

    entry = WorkoutExercise(
        exercise_id=exercise_id,
        sets=sets,
        reps=reps,
        weight=weight,
        duration_seconds=duration,
    )
    try:
        updated = await WorkoutService().complete_exercise(
            workout_id, entry, perceived_difficulty=rpe
        )
    except WorkoutNotFoundError as e:
        echo_error(str(e))
        ctx.exit(1)

    echo_success(
        f"Logged {exercise_id} "
        f"({len(updated.completed_exercises)}/{len(updated.planned_exercises)}, "
        f"{updated.completion_rate:.0%})"
    )


@workout.command("history")
@click.option("--user", "user_id", help="Profile id (defaults to the newest)")
@click.option("--days", "-d", type=int, help="How many days back to look")
@click.pass_context
@async_command
async def history(ctx: click.Context, user_id: str | None, days: int | None):
    """List recent workouts."""
    ensure_initialized(ctx)
    user = await load_profile(ctx, user_id)

    workouts = await WorkoutService().get_recent_workouts(
        user.id, days or get_settings().history_days
    )
    if not workouts:
        echo_info("No workouts in that period.")
        return

    rows = [
        [
            w.date.isoformat(),
            w.id,
            str(len(w.planned_exercises)),
            f"{w.completion_rate:.0%}",
            f"{w.difficulty_score}/10",
        ]
        for w in workouts
    ]
    click.echo(format_table(["Date", "Workout", "Exercises", "Completed", "Difficulty"], rows))
