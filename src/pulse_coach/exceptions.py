"""Errors raised by the pulse-coach services."""


class PulseCoachError(Exception):
    """Base class for pulse-coach errors."""


class ProfileNotFoundError(PulseCoachError):
    """No user profile exists with the requested id."""

    def __init__(self, user_id: str):
        super().__init__(f"User profile {user_id} not found")
        self.user_id = user_id


class WorkoutNotFoundError(PulseCoachError):
    """No workout exists with the requested id."""

    def __init__(self, workout_id: str):
        super().__init__(f"Workout {workout_id} not found")
        self.workout_id = workout_id


class NoWorkoutTodayError(PulseCoachError):
    """The user has no workout scheduled for today."""

    def __init__(self, user_id: str):
        super().__init__(f"No workout for {user_id} today")
        self.user_id = user_id
