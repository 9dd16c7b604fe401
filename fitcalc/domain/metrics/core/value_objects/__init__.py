"""Value objects for body metric domain."""

from .activity_level import ActivityLevel
from .bmr import BMR, BMREstimate
from .body_stats import BodyStats
from .custom_activity import CustomActivity
from .goal import GoalProjection, GoalType
from .ideal_weight import IdealWeightEstimate
from .sex import Sex
from .tdee import TDEE
from .training_load import TRAINING_PERCENTAGES, TrainingLoad

__all__ = [
    "Sex",
    "ActivityLevel",
    "CustomActivity",
    "BodyStats",
    "BMR",
    "BMREstimate",
    "TDEE",
    "IdealWeightEstimate",
    "TrainingLoad",
    "TRAINING_PERCENTAGES",
    "GoalType",
    "GoalProjection",
]
