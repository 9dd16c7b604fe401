"""Calculator facades: caller-unit inputs in, rounded results out."""

from .bmi_calculator import BMICalculator, compute_bmi
from .bmr_calculator import BMRCalculator, compute_bmr
from .body_fat_calculator import BodyFatCalculator, compute_body_fat
from .goal_calculator import GoalCalculator, compute_goal
from .ideal_weight_calculator import IdealWeightCalculator, compute_ideal_weight
from .one_rm_calculator import OneRMCalculator, compute_one_rm
from .results import (
    BMIResult,
    BMRResult,
    BodyFatResult,
    GoalResult,
    IdealWeightResult,
    OneRMResult,
    TDEEResult,
    TrainingLoadRow,
    WeightRange,
)
from .tdee_calculator import TDEECalculator, compute_tdee

__all__ = [
    # Facades
    "BMICalculator",
    "BMRCalculator",
    "TDEECalculator",
    "BodyFatCalculator",
    "IdealWeightCalculator",
    "OneRMCalculator",
    "GoalCalculator",
    # Functions
    "compute_bmi",
    "compute_bmr",
    "compute_tdee",
    "compute_body_fat",
    "compute_ideal_weight",
    "compute_one_rm",
    "compute_goal",
    # Results
    "BMIResult",
    "BMRResult",
    "TDEEResult",
    "BodyFatResult",
    "IdealWeightResult",
    "WeightRange",
    "OneRMResult",
    "TrainingLoadRow",
    "GoalResult",
]
