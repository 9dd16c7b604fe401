"""BodyFatCalculator - US Navy body fat facade."""

from typing import Any, Optional

import structlog

from ...domain.classification.classifier import classify
from ...domain.classification.tables import BODY_FAT_CATEGORIES
from ...domain.metrics.calculation.body_fat_service import BodyFatService
from ...domain.metrics.core.ports.calculators import IBodyFatCalculator
from ...domain.metrics.core.value_objects.sex import Sex
from ...domain.shared.rounding import round_half_up
from ...domain.units.conversion import convert_height
from ...domain.units.value_objects import HeightUnit
from .base import INPUT_ERRORS, CalculatorFacade
from .inputs import require_number, require_sex, resolve_preference
from .results import BodyFatResult

logger = structlog.get_logger(__name__)


class BodyFatCalculator(CalculatorFacade):
    """Estimate and classify body fat from circumferences."""

    metric = "body_fat"

    def __init__(self, body_fat_service: Optional[IBodyFatCalculator] = None):
        self._body_fat_service = body_fat_service or BodyFatService()

    def compute(
        self,
        gender: Any,
        height: Any,
        waist: Any,
        neck: Any,
        hip: Any = None,
        prefs=None,
    ) -> Optional[BodyFatResult]:
        """
        Compute body fat percentage.

        All lengths are read in the caller's height unit. Hip is required
        for women and ignored for men.

        Returns:
            BodyFatResult, or None while inputs are missing or invalid
        """
        prefs = resolve_preference(prefs)

        def to_cm(field: str, value: Any) -> float:
            return convert_height(require_number(field, value), prefs.height_unit, HeightUnit.CM)

        try:
            sex = require_sex(gender)
            body_fat = self._body_fat_service.calculate(
                sex=sex,
                height=to_cm("height", height),
                waist=to_cm("waist", waist),
                neck=to_cm("neck", neck),
                hip=to_cm("hip", hip) if sex == Sex.FEMALE else None,
            )
        except INPUT_ERRORS as e:
            return self._not_computable(e)

        category = classify(body_fat, BODY_FAT_CATEGORIES[sex])
        logger.debug("body_fat_computed", body_fat=body_fat, category=category.label)
        return BodyFatResult(body_fat_percentage=round_half_up(body_fat, 1), category=category)


_calculator = BodyFatCalculator()


def compute_body_fat(
    gender: Any,
    height: Any,
    waist: Any,
    neck: Any,
    hip: Any = None,
    prefs=None,
) -> Optional[BodyFatResult]:
    """Compute body fat with the default services. See ``BodyFatCalculator.compute``."""
    return _calculator.compute(gender, height, waist, neck, hip, prefs)
