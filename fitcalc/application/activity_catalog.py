"""CustomActivityCatalog - session-held table of user-defined activities."""

from collections.abc import Mapping
from typing import Dict, Iterator, List, Optional, Union

import structlog

from ..domain.metrics.core.exceptions.domain_errors import MissingInputError
from ..domain.metrics.core.ports.calculators import ActivitySelector
from ..domain.metrics.core.value_objects.activity_level import ActivityLevel
from ..domain.metrics.core.value_objects.custom_activity import CustomActivity

logger = structlog.get_logger(__name__)

CUSTOM_PREFIX = "custom-"


class CustomActivityCatalog(Mapping):
    """
    Custom activities owned by one caller session.

    Behaves as a read-only mapping of id to ``CustomActivity`` so it can be
    passed straight to the TDEE and goal calculators. Nothing is persisted.

    Usage:

        catalog = CustomActivityCatalog()
        worker = catalog.add("Construction Worker", 1.8)
        compute_tdee(80, 180, 30, "male", worker.id, custom_activities=catalog)
    """

    def __init__(self) -> None:
        self._activities: Dict[str, CustomActivity] = {}

    def add(self, name: str, factor: float) -> CustomActivity:
        """
        Define a new activity.

        Raises:
            DomainViolationError: If name is blank or factor outside [1.0, 3.0]
        """
        activity = CustomActivity.create(name, factor)
        self._activities[activity.id] = activity
        logger.debug("custom_activity_added", id=activity.id, factor=activity.factor)
        return activity

    def remove(self, activity_id: str) -> Optional[CustomActivity]:
        """Forget an activity, returning it if it existed."""
        return self._activities.pop(_strip_prefix(activity_id), None)

    def activities(self) -> List[CustomActivity]:
        """Activities in creation order."""
        return list(self._activities.values())

    def __getitem__(self, activity_id: str) -> CustomActivity:
        return self._activities[_strip_prefix(activity_id)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._activities)

    def __len__(self) -> int:
        return len(self._activities)


def _strip_prefix(activity_id: str) -> str:
    if isinstance(activity_id, str) and activity_id.startswith(CUSTOM_PREFIX):
        return activity_id[len(CUSTOM_PREFIX):]
    return activity_id


def resolve_activity(
    activity: Union[ActivitySelector, str, None],
    custom_activities: Optional[Mapping] = None,
) -> ActivitySelector:
    """
    Turn a caller's activity choice into a domain activity selector.

    Accepts an ``ActivityLevel`` or its value ("moderate"), a
    ``CustomActivity``, the id of an entry in ``custom_activities``
    (optionally prefixed with "custom-"), or a raw numeric factor. A factor
    equal to a fixed multiplier resolves to that level.

    Raises:
        MissingInputError: If nothing is selected or the id is unknown
    """
    if activity is None or isinstance(activity, bool):
        raise MissingInputError("activity")
    if isinstance(activity, (ActivityLevel, CustomActivity)):
        return activity
    if isinstance(activity, str):
        key = activity.strip()
        if not key:
            raise MissingInputError("activity")
        try:
            return ActivityLevel(key)
        except ValueError:
            pass
        table = custom_activities or {}
        for candidate in (key, _strip_prefix(key)):
            if candidate in table:
                return table[candidate]
        raise MissingInputError("activity")
    return ActivityLevel.from_factor(activity) or activity
