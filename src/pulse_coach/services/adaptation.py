"""Adaptation service: analyse history, suggest and apply changes."""

import logging
import random
from dataclasses import dataclass
from datetime import date, timedelta

from ..db.repositories import (
    AdaptationHistoryRepository,
    ExerciseRepository,
    ProgressRepository,
    WorkoutRepository,
)
from ..engine import analyze_workout_pattern, apply_adaptation, decide_adaptations
from ..exceptions import NoWorkoutTodayError
from ..models.adaptation import AdaptationProposal, AdaptationRecord, PerformanceMetrics
from ..models.user_profile import UserProfile
from ..models.workout import Workout

logger = logging.getLogger(__name__)


@dataclass
class AdaptationInsights:
    """Metrics and suggested adaptations for a user's recent training."""

    metrics: PerformanceMetrics
    suggested_adaptations: list[AdaptationProposal]
    workout_count: int

    @property
    def avg_completion_rate(self) -> float:
        return self.metrics.completion_rate

    @property
    def consistency_score(self) -> float:
        return self.metrics.consistency_score

    def to_dict(self) -> dict:
        return {
            "metrics": self.metrics.to_dict(),
            "suggested_adaptations": [p.to_dict() for p in self.suggested_adaptations],
            "workout_count": self.workout_count,
            "avg_completion_rate": self.avg_completion_rate,
            "consistency_score": self.consistency_score,
            "recommendations": generate_recommendations(self.metrics),
        }


def generate_recommendations(metrics: PerformanceMetrics) -> list[str]:
    """Plain-language coaching tips for a set of metrics."""
    recommendations = []

    if metrics.completion_rate < 0.5:
        recommendations.append("Consider reducing workout intensity or duration")
        recommendations.append("Focus on building consistency before increasing difficulty")
    elif metrics.completion_rate > 0.9:
        recommendations.append("You're ready for more challenging workouts")
        recommendations.append("Consider adding weight or increasing reps")

    if metrics.consistency_score < 0.5:
        recommendations.append("Try to maintain a more regular workout schedule")
        recommendations.append("Set reminders or find an accountability partner")

    if metrics.difficulty_trend < -1:
        recommendations.append("Your workouts are getting easier - time to step it up!")
    elif metrics.difficulty_trend > 2:
        recommendations.append("Rapid difficulty increases detected - ensure adequate recovery")

    if not recommendations:
        recommendations.append("Great progress! Keep up the consistent effort")

    return recommendations


def _snapshot(workout: Workout) -> dict:
    return {
        "workout_id": workout.id,
        "difficulty_score": workout.difficulty_score,
        "planned_exercise_ids": [e.exercise_id for e in workout.planned_exercises],
    }


class AdaptationService:
    """Runs the adaptation engine against stored history and logs the results."""

    def __init__(
        self,
        workout_repo: WorkoutRepository | None = None,
        exercise_repo: ExerciseRepository | None = None,
        history_repo: AdaptationHistoryRepository | None = None,
        progress_repo: ProgressRepository | None = None,
    ):
        self.workout_repo = workout_repo or WorkoutRepository()
        self.exercise_repo = exercise_repo or ExerciseRepository()
        self.history_repo = history_repo or AdaptationHistoryRepository()
        self.progress_repo = progress_repo or ProgressRepository()

    async def analyze(
        self,
        user: UserProfile,
        days: int = 30,
        today: date | None = None,
        include_today: bool = True,
    ) -> PerformanceMetrics:
        """Performance metrics over the last ``days`` days.

        ``user_feedback`` is the mean perceived difficulty logged over the same
        window, or None when nothing was logged.
        """
        today = today or date.today()
        since = today - timedelta(days=days)
        workouts = await self.workout_repo.list_since(user.id, since)
        entries = await self.progress_repo.list_since(user.id, since)
        if not include_today:
            workouts = [w for w in workouts if w.date < today]
            entries = [e for e in entries if e.date < today]
        catalog = await self.exercise_repo.get_all()

        metrics = analyze_workout_pattern(workouts, catalog, user)
        if entries:
            metrics.user_feedback = sum(e.perceived_difficulty for e in entries) / len(entries)
        return metrics

    async def suggest(
        self,
        user: UserProfile,
        days: int = 30,
        today: date | None = None,
        include_today: bool = True,
    ) -> AdaptationInsights:
        """Metrics plus every adaptation the rules currently propose."""
        metrics = await self.analyze(user, days, today, include_today)
        return AdaptationInsights(
            metrics=metrics,
            suggested_adaptations=decide_adaptations(metrics),
            workout_count=len(metrics.recent_workouts),
        )

    async def apply_to_workout(
        self,
        user: UserProfile,
        proposal: AdaptationProposal,
        workout: Workout,
        rng: random.Random | None = None,
    ) -> tuple[Workout, AdaptationRecord]:
        """Apply one proposal, store the new workout and log the change."""
        catalog = await self.exercise_repo.get_all()
        adapted = apply_adaptation(proposal, catalog, workout, rng=rng)
        await self.workout_repo.update(adapted)

        record = proposal.to_record(
            user.id,
            previous_value=_snapshot(workout),
            new_value=_snapshot(adapted),
        )
        await self.history_repo.append(record)

        logger.info(
            "Applied %s to workout %s for %s: %s",
            proposal.adaptation_type.value,
            workout.id,
            user.id,
            proposal.reason,
        )
        return adapted, record

    async def adapt_todays_workout(
        self,
        user: UserProfile,
        days: int = 30,
        rng: random.Random | None = None,
        today: date | None = None,
    ) -> tuple[Workout, list[AdaptationRecord]]:
        """Apply every suggested adaptation to today's workout, in rule order.

        Raises:
            NoWorkoutTodayError: If the user has no workout dated today
        """
        today = today or date.today()
        workout = await self.workout_repo.get_by_date(user.id, today)
        if workout is None:
            raise NoWorkoutTodayError(user.id)

        # Judge today's plan on earlier sessions only
        insights = await self.suggest(user, days, today, include_today=False)
        records = []
        for proposal in insights.suggested_adaptations:
            workout, record = await self.apply_to_workout(user, proposal, workout, rng=rng)
            records.append(record)

        return workout, records

    async def history(self, user_id: str, limit: int = 20) -> list[AdaptationRecord]:
        """Applied adaptations, newest first."""
        return await self.history_repo.list_recent(user_id, limit)
