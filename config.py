"""Par-calculation settings.

Defaults are the speedgolf time-par constants. Each can be overridden with a
``SPEEDGOLF_*`` environment variable (a ``.env`` file in the working
directory is honoured).
"""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

FEET_IN_MILE = 5280


class ParSettings(BaseModel):
    """Constants used to sample paths and derive time par."""
    model_config = ConfigDict(frozen=True)

    sampling_distance_feet: float = Field(10.0, gt=0)
    # Seconds per foot: 7:00/mile for men, 8:00/mile for women.
    mens_run_pace: float = Field(420 / FEET_IN_MILE, gt=0)
    womens_run_pace: float = Field(480 / FEET_IN_MILE, gt=0)
    # Seconds allotted for each stroke par.
    mens_shot_box_seconds: float = Field(30.0, ge=0)
    womens_shot_box_seconds: float = Field(35.0, ge=0)

    def run_pace(self, gender: str) -> float:
        return self.womens_run_pace if gender == "womens" else self.mens_run_pace

    def shot_box_seconds(self, gender: str) -> float:
        return self.womens_shot_box_seconds if gender == "womens" else self.mens_shot_box_seconds


ENV_VARS = {
    "sampling_distance_feet": "SPEEDGOLF_SAMPLING_DISTANCE_FEET",
    "mens_run_pace": "SPEEDGOLF_MENS_RUN_PACE",
    "womens_run_pace": "SPEEDGOLF_WOMENS_RUN_PACE",
    "mens_shot_box_seconds": "SPEEDGOLF_MENS_SHOT_BOX_SECONDS",
    "womens_shot_box_seconds": "SPEEDGOLF_WOMENS_SHOT_BOX_SECONDS",
}

DEFAULT_SETTINGS = ParSettings()


def load_settings(env_file: Optional[str] = None) -> ParSettings:
    """Build settings from the environment, falling back to the defaults."""
    load_dotenv(env_file)
    overrides = {
        field: os.environ[var]
        for field, var in ENV_VARS.items()
        if os.environ.get(var)
    }
    return ParSettings(**overrides)
