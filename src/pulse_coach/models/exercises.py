"""Exercise definitions and the built-in catalog."""

from dataclasses import dataclass, field
from enum import Enum


class ExerciseCategory(str, Enum):
    """Broad training category of an exercise."""

    STRENGTH = "strength"
    CARDIO = "cardio"
    FLEXIBILITY = "flexibility"


class MuscleGroup(str, Enum):
    """Muscle groups used to spread a workout across the body."""

    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    BICEPS = "biceps"
    TRICEPS = "triceps"
    QUADS = "quads"
    HAMSTRINGS = "hamstrings"
    GLUTES = "glutes"
    CALVES = "calves"
    CORE = "core"
    LOWER_BACK = "lower_back"
    HIPS = "hips"
    FULL_BODY = "full_body"
    CARDIOVASCULAR = "cardiovascular"


class EquipmentType(str, Enum):
    """Equipment an exercise may require."""

    DUMBBELLS = "dumbbells"
    BARBELL = "barbell"
    KETTLEBELL = "kettlebell"
    BENCH = "bench"
    PULL_UP_BAR = "pull_up_bar"
    RESISTANCE_BAND = "resistance_band"
    JUMP_ROPE = "jump_rope"
    YOGA_MAT = "yoga_mat"


def _parse_tag(vocabulary: type[Enum], value: str) -> Enum | str:
    """Known values become enum members; anything else is kept as given."""
    try:
        return vocabulary(value)
    except ValueError:
        return value


def _tag_value(tag: Enum | str) -> str:
    return tag.value if isinstance(tag, Enum) else tag


@dataclass(frozen=True)
class Exercise:
    """A catalog exercise. Reference data, never mutated by the engine."""

    id: str
    name: str
    category: ExerciseCategory
    muscle_groups: list[MuscleGroup | str]
    equipment_needed: list[EquipmentType | str] = field(default_factory=list)
    difficulty_base: int = 5  # 1-10
    instructions: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category.value,
            "muscle_groups": [_tag_value(mg) for mg in self.muscle_groups],
            "equipment_needed": [_tag_value(eq) for eq in self.equipment_needed],
            "difficulty_base": self.difficulty_base,
            "instructions": self.instructions,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Exercise":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            category=ExerciseCategory(data["category"]),
            muscle_groups=[_parse_tag(MuscleGroup, mg) for mg in data["muscle_groups"]],
            equipment_needed=[_parse_tag(EquipmentType, eq) for eq in data.get("equipment_needed", [])],
            difficulty_base=int(data.get("difficulty_base", 5)),
            instructions=data.get("instructions", ""),
        )

    def requires_only(self, equipment: list[EquipmentType]) -> bool:
        """True if every piece of required equipment is in ``equipment``."""
        return all(eq in equipment for eq in self.equipment_needed)

    def shares_muscles_with(self, other: "Exercise") -> bool:
        """True if the two exercises train at least one common muscle group."""
        return any(mg in other.muscle_groups for mg in self.muscle_groups)


# Built-in catalog seeded by `pulse-coach init`
COMMON_EXERCISES: list[Exercise] = [
    # Strength - upper body
    Exercise(
        id="push-up",
        name="Push-Up",
        category=ExerciseCategory.STRENGTH,
        muscle_groups=[MuscleGroup.CHEST, MuscleGroup.TRICEPS, MuscleGroup.SHOULDERS],
        difficulty_base=3,
        instructions="Hands under shoulders, body straight, lower chest to the floor and press back up.",
    ),
    Exercise(
        id="incline-push-up",
        name="Incline Push-Up",
        category=ExerciseCategory.STRENGTH,
        muscle_groups=[MuscleGroup.CHEST, MuscleGroup.TRICEPS],
        equipment_needed=[EquipmentType.BENCH],
        difficulty_base=2,
        instructions="Hands on a bench, body straight, lower chest to the edge and press away.",
    ),
    Exercise(
        id="diamond-push-up",
        name="Diamond Push-Up",
        category=ExerciseCategory.STRENGTH,
        muscle_groups=[MuscleGroup.TRICEPS, MuscleGroup.CHEST],
        difficulty_base=6,
        instructions="Hands together under the chest forming a diamond, lower and press.",
    ),
    Exercise(
        id="dumbbell-bench-press",
        name="Dumbbell Bench Press",
        category=ExerciseCategory.STRENGTH,
        muscle_groups=[MuscleGroup.CHEST, MuscleGroup.TRICEPS, MuscleGroup.SHOULDERS],
        equipment_needed=[EquipmentType.DUMBBELLS, EquipmentType.BENCH],
        difficulty_base=5,
        instructions="Lie on the bench, press the dumbbells from chest level to lockout.",
    ),
    Exercise(
        id="dumbbell-row",
        name="Dumbbell Row",
        category=ExerciseCategory.STRENGTH,
        muscle_groups=[MuscleGroup.BACK, MuscleGroup.BICEPS],
        equipment_needed=[EquipmentType.DUMBBELLS],
        difficulty_base=4,
        instructions="Brace on a bench, pull the dumbbell to the hip, lower under control.",
    ),
    Exercise(
        id="dumbbell-shoulder-press",
        name="Dumbbell Shoulder Press",
        category=ExerciseCategory.STRENGTH,
        muscle_groups=[MuscleGroup.SHOULDERS, MuscleGroup.TRICEPS],
        equipment_needed=[EquipmentType.DUMBBELLS],
        difficulty_base=5,
        instructions="Press the dumbbells overhead from shoulder height without arching the back.",
    ),
    Exercise(
        id="dumbbell-curl",
        name="Dumbbell Curl",
        category=ExerciseCategory.STRENGTH,
        muscle_groups=[MuscleGroup.BICEPS],
        equipment_needed=[EquipmentType.DUMBBELLS],
        difficulty_base=2,
        instructions="Elbows pinned to the sides, curl the weights up and lower slowly.",
    ),
    Exercise(
        id="band-pull-apart",
        name="Band Pull-Apart",
        category=ExerciseCategory.STRENGTH,
        muscle_groups=[MuscleGroup.BACK, MuscleGroup.SHOULDERS],
        equipment_needed=[EquipmentType.RESISTANCE_BAND],
        difficulty_base=1,
        instructions="Arms straight at chest height, pull the band apart until it touches the chest.",
    ),
    Exercise(
        id="pull-up",
        name="Pull-Up",
        category=ExerciseCategory.STRENGTH,
        muscle_groups=[MuscleGroup.BACK, MuscleGroup.BICEPS],
        equipment_needed=[EquipmentType.PULL_UP_BAR],
        difficulty_base=7,
        instructions="Hang from the bar, pull until the chin clears it, lower to a full hang.",
    ),
    Exercise(
        id="barbell-bench-press",
        name="Barbell Bench Press",
        category=ExerciseCategory.STRENGTH,
        muscle_groups=[MuscleGroup.CHEST, MuscleGroup.TRICEPS, MuscleGroup.SHOULDERS],
        equipment_needed=[EquipmentType.BARBELL, EquipmentType.BENCH],
        difficulty_base=7,
        instructions="Lower the bar to mid chest, press to lockout keeping the shoulder blades set.",
    ),
    # Strength - lower body and core
    Exercise(
        id="bodyweight-squat",
        name="Bodyweight Squat",
        category=ExerciseCategory.STRENGTH,
        muscle_groups=[MuscleGroup.QUADS, MuscleGroup.GLUTES],
        difficulty_base=2,
        instructions="Feet shoulder width, sit back and down to parallel, drive through the heels.",
    ),
    Exercise(
        id="glute-bridge",
        name="Glute Bridge",
        category=ExerciseCategory.STRENGTH,
        muscle_groups=[MuscleGroup.GLUTES, MuscleGroup.HAMSTRINGS],
        difficulty_base=1,
        instructions="Lie on the back, knees bent, drive the hips up and squeeze the glutes.",
    ),
    Exercise(
        id="walking-lunge",
        name="Walking Lunge",
        category=ExerciseCategory.STRENGTH,
        muscle_groups=[MuscleGroup.QUADS, MuscleGroup.GLUTES, MuscleGroup.HAMSTRINGS],
        difficulty_base=4,
        instructions="Step forward into a lunge, back knee near the floor, alternate legs.",
    ),
    Exercise(
        id="goblet-squat",
        name="Goblet Squat",
        category=ExerciseCategory.STRENGTH,
        muscle_groups=[MuscleGroup.QUADS, MuscleGroup.GLUTES, MuscleGroup.CORE],
        equipment_needed=[EquipmentType.KETTLEBELL],
        difficulty_base=4,
        instructions="Hold the kettlebell at the chest and squat between the knees.",
    ),
    Exercise(
        id="kettlebell-deadlift",
        name="Kettlebell Deadlift",
        category=ExerciseCategory.STRENGTH,
        muscle_groups=[MuscleGroup.HAMSTRINGS, MuscleGroup.GLUTES, MuscleGroup.LOWER_BACK],
        equipment_needed=[EquipmentType.KETTLEBELL],
        difficulty_base=4,
        instructions="Hinge at the hips with a flat back and stand up with the bell.",
    ),
    Exercise(
        id="bulgarian-split-squat",
        name="Bulgarian Split Squat",
        category=ExerciseCategory.STRENGTH,
        muscle_groups=[MuscleGroup.QUADS, MuscleGroup.GLUTES],
        equipment_needed=[EquipmentType.BENCH],
        difficulty_base=6,
        instructions="Rear foot on the bench, lower the back knee toward the floor.",
    ),
    Exercise(
        id="barbell-back-squat",
        name="Barbell Back Squat",
        category=ExerciseCategory.STRENGTH,
        muscle_groups=[MuscleGroup.QUADS, MuscleGroup.GLUTES, MuscleGroup.LOWER_BACK],
        equipment_needed=[EquipmentType.BARBELL],
        difficulty_base=8,
        instructions="Bar on the upper back, brace, squat to depth and stand.",
    ),
    Exercise(
        id="plank",
        name="Plank",
        category=ExerciseCategory.STRENGTH,
        muscle_groups=[MuscleGroup.CORE],
        difficulty_base=2,
        instructions="Forearms under shoulders, hold a straight line from head to heels.",
    ),
    Exercise(
        id="pistol-squat",
        name="Pistol Squat",
        category=ExerciseCategory.STRENGTH,
        muscle_groups=[MuscleGroup.QUADS, MuscleGroup.GLUTES, MuscleGroup.CORE],
        difficulty_base=9,
        instructions="Squat on one leg with the other extended forward, stand back up.",
    ),
    # Cardio
    Exercise(
        id="jumping-jacks",
        name="Jumping Jacks",
        category=ExerciseCategory.CARDIO,
        muscle_groups=[MuscleGroup.FULL_BODY, MuscleGroup.CARDIOVASCULAR],
        difficulty_base=1,
        instructions="Jump the feet out while raising the arms overhead, return and repeat.",
    ),
    Exercise(
        id="high-knees",
        name="High Knees",
        category=ExerciseCategory.CARDIO,
        muscle_groups=[MuscleGroup.QUADS, MuscleGroup.CARDIOVASCULAR],
        difficulty_base=3,
        instructions="Run in place driving the knees to hip height.",
    ),
    Exercise(
        id="mountain-climbers",
        name="Mountain Climbers",
        category=ExerciseCategory.CARDIO,
        muscle_groups=[MuscleGroup.CORE, MuscleGroup.SHOULDERS, MuscleGroup.CARDIOVASCULAR],
        difficulty_base=4,
        instructions="From a high plank, drive the knees to the chest alternately at pace.",
    ),
    Exercise(
        id="jump-rope",
        name="Jump Rope",
        category=ExerciseCategory.CARDIO,
        muscle_groups=[MuscleGroup.CALVES, MuscleGroup.CARDIOVASCULAR],
        equipment_needed=[EquipmentType.JUMP_ROPE],
        difficulty_base=4,
        instructions="Small hops on the balls of the feet, turn the rope from the wrists.",
    ),
    Exercise(
        id="burpees",
        name="Burpees",
        category=ExerciseCategory.CARDIO,
        muscle_groups=[MuscleGroup.FULL_BODY, MuscleGroup.CARDIOVASCULAR],
        difficulty_base=6,
        instructions="Squat, kick back to a plank, push up, jump the feet in and leap up.",
    ),
    Exercise(
        id="kettlebell-swing",
        name="Kettlebell Swing",
        category=ExerciseCategory.CARDIO,
        muscle_groups=[MuscleGroup.GLUTES, MuscleGroup.HAMSTRINGS, MuscleGroup.CARDIOVASCULAR],
        equipment_needed=[EquipmentType.KETTLEBELL],
        difficulty_base=6,
        instructions="Hinge and snap the hips to float the bell to chest height.",
    ),
    Exercise(
        id="sprint-intervals",
        name="Sprint Intervals",
        category=ExerciseCategory.CARDIO,
        muscle_groups=[MuscleGroup.QUADS, MuscleGroup.HAMSTRINGS, MuscleGroup.CARDIOVASCULAR],
        difficulty_base=8,
        instructions="All-out sprint for the interval, walk back to recover.",
    ),
    # Flexibility
    Exercise(
        id="hamstring-stretch",
        name="Standing Hamstring Stretch",
        category=ExerciseCategory.FLEXIBILITY,
        muscle_groups=[MuscleGroup.HAMSTRINGS, MuscleGroup.LOWER_BACK],
        difficulty_base=1,
        instructions="Heel on a low step, hinge forward with a flat back until you feel a stretch.",
    ),
    Exercise(
        id="cat-cow",
        name="Cat-Cow",
        category=ExerciseCategory.FLEXIBILITY,
        muscle_groups=[MuscleGroup.BACK, MuscleGroup.CORE],
        equipment_needed=[EquipmentType.YOGA_MAT],
        difficulty_base=1,
        instructions="On hands and knees, alternate arching and rounding the spine with the breath.",
    ),
    Exercise(
        id="hip-flexor-stretch",
        name="Kneeling Hip Flexor Stretch",
        category=ExerciseCategory.FLEXIBILITY,
        muscle_groups=[MuscleGroup.HIPS, MuscleGroup.QUADS],
        difficulty_base=2,
        instructions="Half kneel, tuck the pelvis and shift forward until the front of the hip stretches.",
    ),
    Exercise(
        id="downward-dog",
        name="Downward Dog",
        category=ExerciseCategory.FLEXIBILITY,
        muscle_groups=[MuscleGroup.HAMSTRINGS, MuscleGroup.CALVES, MuscleGroup.SHOULDERS],
        equipment_needed=[EquipmentType.YOGA_MAT],
        difficulty_base=3,
        instructions="Hips high, press the chest toward the thighs and the heels toward the floor.",
    ),
    Exercise(
        id="pigeon-pose",
        name="Pigeon Pose",
        category=ExerciseCategory.FLEXIBILITY,
        muscle_groups=[MuscleGroup.HIPS, MuscleGroup.GLUTES],
        equipment_needed=[EquipmentType.YOGA_MAT],
        difficulty_base=5,
        instructions="Front shin across the mat, back leg long, fold forward over the front leg.",
    ),
    Exercise(
        id="bridge-pose",
        name="Full Bridge",
        category=ExerciseCategory.FLEXIBILITY,
        muscle_groups=[MuscleGroup.BACK, MuscleGroup.SHOULDERS, MuscleGroup.HIPS],
        difficulty_base=7,
        instructions="From the back, press through hands and feet into a full backbend.",
    ),
]
