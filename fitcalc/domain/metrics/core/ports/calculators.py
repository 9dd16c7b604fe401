"""Calculator ports - interfaces for the body metric formulas."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence, Union

from ..value_objects.activity_level import ActivityLevel
from ..value_objects.bmr import BMR, BMREstimate
from ..value_objects.body_stats import BodyStats
from ..value_objects.custom_activity import CustomActivity
from ..value_objects.ideal_weight import IdealWeightEstimate
from ..value_objects.sex import Sex
from ..value_objects.tdee import TDEE
from ..value_objects.training_load import TrainingLoad

ActivitySelector = Union[ActivityLevel, CustomActivity, float]


class IBMICalculator(ABC):
    """Port for Body Mass Index calculation."""

    @abstractmethod
    def calculate(self, weight: float, height: float) -> float:
        """Calculate BMI.

        Args:
            weight: Body weight in kg
            height: Height in cm

        Returns:
            float: BMI in kg/m²
        """
        pass


class IBMRCalculator(ABC):
    """Port for BMR calculation.

    Calculates Basal Metabolic Rate using Mifflin-St Jeor formula.
    """

    @abstractmethod
    def calculate(self, stats: BodyStats) -> BMR:
        """Calculate BMR from body stats.

        Args:
            stats: Body measurements

        Returns:
            BMR: Calculated basal metabolic rate
        """
        pass

    @abstractmethod
    def estimate(self, stats: BodyStats, body_fat: Optional[float] = None) -> BMREstimate:
        """Calculate BMR with every applicable equation.

        Args:
            stats: Body measurements
            body_fat: Optional body fat percentage for Katch-McArdle

        Returns:
            BMREstimate: Per-equation estimates
        """
        pass


class ITDEECalculator(ABC):
    """Port for TDEE calculation.

    Calculates Total Daily Energy Expenditure from BMR and activity.
    """

    @abstractmethod
    def calculate(self, bmr: BMR, activity: ActivitySelector) -> TDEE:
        """Calculate TDEE from BMR and activity.

        Args:
            bmr: Basal metabolic rate
            activity: Fixed activity level, custom activity or raw factor

        Returns:
            TDEE: Total daily energy expenditure
        """
        pass


class IBodyFatCalculator(ABC):
    """Port for circumference-based body fat estimation."""

    @abstractmethod
    def calculate(
        self,
        sex: Sex,
        height: float,
        waist: float,
        neck: float,
        hip: Optional[float] = None,
    ) -> float:
        """Estimate body fat percentage.

        Args:
            sex: Biological sex
            height: Height in cm
            waist: Waist circumference in cm
            neck: Neck circumference in cm
            hip: Hip circumference in cm (required for women)

        Returns:
            float: Body fat percentage (0-100)
        """
        pass


class IIdealWeightCalculator(ABC):
    """Port for height-based ideal weight estimation."""

    @abstractmethod
    def calculate(self, height: float, sex: Sex) -> IdealWeightEstimate:
        """Estimate ideal body weight.

        Args:
            height: Height in cm
            sex: Biological sex

        Returns:
            IdealWeightEstimate: Per-formula estimates in kg
        """
        pass


class IOneRepMaxCalculator(ABC):
    """Port for one-repetition maximum estimation."""

    @abstractmethod
    def calculate(self, weight: float, reps: int) -> float:
        """Estimate one-rep max from a submaximal set.

        Args:
            weight: Load lifted
            reps: Repetitions completed

        Returns:
            float: One-rep max in the unit of weight
        """
        pass

    @abstractmethod
    def training_loads(self, one_rm: float) -> Sequence[TrainingLoad]:
        """Working weights at the standard training percentages."""
        pass
