"""User profile commands."""

from uuid import uuid4

import click

from ..clients.manual import ManualInputClient
from ..db.repositories import UserProfileRepository
from ..models.exercises import EquipmentType
from ..models.user_profile import FitnessGoal, FitnessLevel, UserProfile
from .base import (
    async_command,
    echo_info,
    echo_success,
    echo_warning,
    ensure_initialized,
    format_table,
    load_profile,
)


@click.group()
def profile():
    """Create and view user profiles."""
    pass


@profile.command("create")
@click.option("--name", help="Display name (skips the questionnaire)")
@click.option("--email", help="Contact email")
@click.option(
    "--level",
    type=click.Choice([lvl.value for lvl in FitnessLevel]),
    help="Fitness level",
)
@click.option(
    "--goal",
    "goals",
    multiple=True,
    type=click.Choice([g.value for g in FitnessGoal]),
    help="Training goal (repeatable)",
)
@click.option(
    "--equipment",
    multiple=True,
    type=click.Choice([eq.value for eq in EquipmentType]),
    help="Available equipment (repeatable)",
)
@click.pass_context
@async_command
async def create(
    ctx: click.Context,
    name: str | None,
    email: str | None,
    level: str | None,
    goals: tuple[str, ...],
    equipment: tuple[str, ...],
):
    """Create a profile.

    Without --name and --level an interactive questionnaire is shown.

    Examples:

        pulse-coach profile create

        pulse-coach profile create --name Sam --level beginner --goal strength
    """
    ensure_initialized(ctx)

    if name and level:
        user = UserProfile(
            id=uuid4().hex,
            name=name,
            email=email,
            fitness_level=FitnessLevel(level),
            goals=[FitnessGoal(g) for g in goals] or [FitnessGoal.GENERAL_FITNESS],
            equipment=[EquipmentType(eq) for eq in equipment],
        )
    else:
        user = await ManualInputClient().collect_profile()
        if user is None:
            echo_warning("Profile creation cancelled.")
            ctx.exit(1)

    await UserProfileRepository().create(user)
    echo_success(f"Profile created: {user.id}")
    click.echo()
    click.echo(user.get_summary())


@profile.command("show")
@click.option("--user", "user_id", help="Profile id (defaults to the newest)")
@click.pass_context
@async_command
async def show(ctx: click.Context, user_id: str | None):
    """Show a profile."""
    ensure_initialized(ctx)
    user = await load_profile(ctx, user_id)
    click.echo(f"Id: {user.id}")
    click.echo(user.get_summary())


@profile.command("list")
@click.pass_context
@async_command
async def list_profiles(ctx: click.Context):
    """List all profiles."""
    ensure_initialized(ctx)
    profiles = await UserProfileRepository().list_all()

    if not profiles:
        echo_info("No profiles yet.")
        return

    rows = [
        [p.id, p.name or "-", p.fitness_level.value, ", ".join(g.value for g in p.goals)]
        for p in profiles
    ]
    click.echo(format_table(["Id", "Name", "Level", "Goals"], rows))
