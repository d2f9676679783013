"""Adaptation commands."""

import click

from ..config import get_settings
from ..exceptions import NoWorkoutTodayError
from ..services.adaptation import AdaptationService, generate_recommendations
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
    load_profile,
)


@click.group()
def adapt():
    """Analyse performance and adapt upcoming workouts."""
    pass


@adapt.command("insights")
@click.option("--user", "user_id", help="Profile id (defaults to the newest)")
@click.option("--days", "-d", type=int, help="Analysis window in days")
@click.pass_context
@async_command
async def insights(ctx: click.Context, user_id: str | None, days: int | None):
    """Show performance metrics and suggested adaptations."""
    ensure_initialized(ctx)
    user = await load_profile(ctx, user_id)

    result = await AdaptationService().suggest(user, days or get_settings().history_days)
    metrics = result.metrics

    click.echo()
    click.echo(click.style("Performance", bold=True))
    click.echo(f"  Workouts analysed: {result.workout_count}")
    click.echo(f"  Completion rate:   {metrics.completion_rate:.0%}")
    click.echo(f"  Consistency:       {metrics.consistency_score:.2f}")
    click.echo(f"  Difficulty trend:  {metrics.difficulty_trend:+.2f}")
    if metrics.user_feedback is not None:
        click.echo(f"  Perceived effort:  {metrics.user_feedback:.1f}/10")

    click.echo()
    click.echo(click.style("Suggested adaptations", bold=True))
    if result.suggested_adaptations:
        for proposal in result.suggested_adaptations:
            click.echo(f"  - {proposal.adaptation_type.value}: {proposal.reason}")
    else:
        click.echo("  none")

    click.echo()
    click.echo(click.style("Recommendations", bold=True))
    for tip in generate_recommendations(metrics):
        click.echo(f"  - {tip}")


@adapt.command("apply")
@click.option("--user", "user_id", help="Profile id (defaults to the newest)")
@click.pass_context
@async_command
async def apply(ctx: click.Context, user_id: str | None):
    """Apply every suggested adaptation to today's workout."""
    ensure_initialized(ctx)
    user = await load_profile(ctx, user_id)

    try:
        workout, records = await AdaptationService().adapt_todays_workout(
            user, get_settings().history_days
        )
    except NoWorkoutTodayError as e:
        echo_error(f"{e}. Run 'pulse-coach workout today' first.")
        ctx.exit(1)

    if not records:
        echo_info("No adaptations needed.")
        return

    for record in records:
        echo_success(f"{record.change_type.value}: {record.reason}")
    click.echo(
        f"Workout {workout.id} now has {len(workout.planned_exercises)} exercises "
        f"at difficulty {workout.difficulty_score}/10."
    )


@adapt.command("history")
@click.option("--user", "user_id", help="Profile id (defaults to the newest)")
@click.option("--limit", "-n", type=int, help="Number of entries to show")
@click.pass_context
@async_command
async def history(ctx: click.Context, user_id: str | None, limit: int | None):
    """Show applied adaptations, newest first."""
    ensure_initialized(ctx)
    user = await load_profile(ctx, user_id)

    records = await AdaptationService().history(
        user.id, limit or get_settings().history_limit
    )
    if not records:
        echo_info("No adaptations applied yet.")
        return

    rows = [
        [
            r.created_at.strftime("%Y-%m-%d %H:%M") if r.created_at else "-",
            r.change_type.value,
            r.reason,
        ]
        for r in records
    ]
    click.echo(format_table(["When", "Change", "Reason"], rows))
