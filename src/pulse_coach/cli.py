"""CLI entry point for pulse-coach."""

import click

from . import __version__
from .commands import adapt, init, profile, serve, workout
from .config import configure_logging, get_settings


@click.group()
@click.version_option(version=__version__, prog_name="pulse-coach")
@click.option("--verbose", "-v", is_flag=True, help="Log engine decisions (DEBUG)")
def main(verbose: bool):
    """pulse-coach: adaptive daily workouts.

    Generates a workout each day from your profile and history, tracks what
    you complete, and adjusts difficulty and exercise choice as you go.

    Example usage:

        # Initialize the database and exercise catalog
        pulse-coach init

        # Create your profile
        pulse-coach profile create

        # Get today's workout and log an exercise
        pulse-coach workout today
        pulse-coach workout complete <workout-id> push-up --reps 12

        # Review performance and adapt
        pulse-coach adapt insights
        pulse-coach adapt apply
    """
    configure_logging("DEBUG" if verbose else get_settings().log_level)


# Register commands
main.add_command(init)
main.add_command(profile)
main.add_command(workout)
main.add_command(adapt)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
