"""Calculation services for body metric domain."""

from .bmi_service import BMIService
from .bmr_service import BMRService
from .body_fat_service import BodyFatService
from .goal_projection_service import GoalProjectionService
from .ideal_weight_service import IdealWeightService
from .one_rep_max_service import OneRepMaxService
from .tdee_service import TDEEService, resolve_activity_factor

__all__ = [
    "BMIService",
    "BMRService",
    "TDEEService",
    "BodyFatService",
    "IdealWeightService",
    "OneRepMaxService",
    "GoalProjectionService",
    "resolve_activity_factor",
]
