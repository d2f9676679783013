"""Tests for the JSON exercise catalog loader."""

import json

from pulse_coach.data import load_exercises_from_json
from pulse_coach.models.exercises import EquipmentType, ExerciseCategory, MuscleGroup

VALID = {
    "id": "farmer-carry",
    "name": "Farmer Carry",
    "category": "strength",
    "muscle_groups": ["full_body", "core"],
    "equipment_needed": ["dumbbells"],
    "difficulty_base": 4,
}


class TestLoadExercisesFromJson:
    """Tests for load_exercises_from_json."""

    def test_list_format(self, tmp_path):
        """Test a bare list of exercises."""
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps([VALID]))

        exercises = load_exercises_from_json(path)

        assert len(exercises) == 1
        assert exercises[0].category == ExerciseCategory.STRENGTH

    def test_wrapped_format(self, tmp_path):
        """Test an object with an exercises key."""
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps({"exercises": [VALID]}))

        assert [e.id for e in load_exercises_from_json(path)] == ["farmer-carry"]

    def test_invalid_rows_skipped(self, tmp_path, caplog):
        """Test unparseable rows are dropped with a warning."""
        path = tmp_path / "catalog.json"
        path.write_text(
            json.dumps(
                [
                    VALID,
                    {**VALID, "id": "bad-category", "category": "dance"},
                    {"id": "missing-fields"},
                ]
            )
        )

        exercises = load_exercises_from_json(path)

        assert [e.id for e in exercises] == ["farmer-carry"]
        assert "bad-category" in caplog.text

    def test_unlisted_muscle_and_equipment_kept(self, tmp_path):
        """Test values outside the built-in vocabularies load as plain strings."""
        path = tmp_path / "catalog.json"
        path.write_text(
            json.dumps(
                [
                    {
                        **VALID,
                        "id": "incline-walk",
                        "muscle_groups": ["forearms", "calves"],
                        "equipment_needed": ["treadmill"],
                    }
                ]
            )
        )

        exercises = load_exercises_from_json(path)

        assert len(exercises) == 1
        walk = exercises[0]
        assert walk.muscle_groups == ["forearms", MuscleGroup.CALVES]
        assert isinstance(walk.muscle_groups[1], MuscleGroup)
        assert walk.equipment_needed == ["treadmill"]
        assert walk.to_dict()["equipment_needed"] == ["treadmill"]
        assert not walk.requires_only([EquipmentType.DUMBBELLS])
