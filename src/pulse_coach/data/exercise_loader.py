"""Exercise catalog loader from JSON."""

import json
import logging
from pathlib import Path

from ..models.exercises import Exercise

logger = logging.getLogger(__name__)


def load_exercises_from_json(path: Path) -> list[Exercise]:
    """Load a catalog from a JSON file.

    The file holds either a list of exercise objects or an object with an
    ``exercises`` list. Rows that do not parse are skipped with a warning.

    Args:
        path: JSON catalog file

    Returns:
        List of Exercise objects loaded from JSON
    """
    with open(path) as f:
        data = json.load(f)

    rows = data.get("exercises", []) if isinstance(data, dict) else data

    exercises = []
    for ex_data in rows:
        try:
            exercises.append(Exercise.from_dict(ex_data))
        except (ValueError, KeyError, TypeError) as e:
            logger.warning(
                "Skipping invalid exercise %s: %s", ex_data.get("id", "unknown"), e
            )
            continue

    return exercises
