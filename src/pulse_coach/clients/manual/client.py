"""Manual user profile input via interactive questionnaire."""

from uuid import uuid4

import questionary
from questionary import Style

from ...models.exercises import EquipmentType
from ...models.user_profile import FitnessGoal, FitnessLevel, UserProfile

# Custom style for questionnaire
custom_style = Style(
    [
        ("qmark", "fg:#00897b bold"),
        ("question", "bold"),
        ("answer", "fg:#f4511e bold"),
        ("pointer", "fg:#00897b bold"),
        ("highlighted", "fg:#00897b bold"),
        ("selected", "fg:#f4511e"),
        ("separator", "fg:#f4511e"),
        ("instruction", ""),
        ("text", ""),
    ]
)

EQUIPMENT_LABELS = {
    EquipmentType.DUMBBELLS: "Dumbbells",
    EquipmentType.BARBELL: "Barbell",
    EquipmentType.KETTLEBELL: "Kettlebell",
    EquipmentType.BENCH: "Bench",
    EquipmentType.PULL_UP_BAR: "Pull-up bar",
    EquipmentType.RESISTANCE_BAND: "Resistance band",
    EquipmentType.JUMP_ROPE: "Jump rope",
    EquipmentType.YOGA_MAT: "Yoga mat",
}


class ManualInputClient:
    """Interactive questionnaire for collecting a user profile."""

    async def collect_profile(self) -> UserProfile | None:
        """Run the questionnaire. Returns None if the user aborts."""
        print("\n=== Fitness Profile Questionnaire ===\n")

        name = await questionary.text(
            "What's your name?",
            style=custom_style,
        ).ask_async()
        if name is None:
            return None

        email = await questionary.text(
            "Email (optional):",
            style=custom_style,
        ).ask_async()

        level = await questionary.select(
            "How would you describe your current fitness?",
            choices=[
                questionary.Choice("Beginner - new or returning to exercise", FitnessLevel.BEGINNER),
                questionary.Choice("Intermediate - training regularly", FitnessLevel.INTERMEDIATE),
                questionary.Choice("Advanced - training hard for years", FitnessLevel.ADVANCED),
            ],
            style=custom_style,
        ).ask_async()
        if level is None:
            return None

        goals = await questionary.checkbox(
            "What are your goals? (Select all that apply)",
            choices=[
                questionary.Choice("Get stronger", FitnessGoal.STRENGTH),
                questionary.Choice("Build muscle", FitnessGoal.MUSCLE_GAIN),
                questionary.Choice("Improve cardio", FitnessGoal.CARDIO),
                questionary.Choice("Lose weight", FitnessGoal.WEIGHT_LOSS),
                questionary.Choice("Improve flexibility", FitnessGoal.FLEXIBILITY),
                questionary.Choice("General fitness", FitnessGoal.GENERAL_FITNESS),
            ],
            style=custom_style,
        ).ask_async()

        if not goals:
            goals = [FitnessGoal.GENERAL_FITNESS]

        equipment = await questionary.checkbox(
            "What equipment do you have at home? (Leave empty for bodyweight only)",
            choices=[
                questionary.Choice(label, eq) for eq, label in EQUIPMENT_LABELS.items()
            ],
            style=custom_style,
        ).ask_async()

        return UserProfile(
            id=uuid4().hex,
            name=name.strip(),
            email=(email or "").strip() or None,
            fitness_level=level,
            goals=goals,
            equipment=equipment or [],
        )
