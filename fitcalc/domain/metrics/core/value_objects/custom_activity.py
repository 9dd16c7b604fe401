"""CustomActivity value object - user-defined activity multiplier."""

from dataclasses import dataclass
from uuid import uuid4

from ..exceptions.domain_errors import DomainViolationError
from .activity_level import validate_activity_factor


@dataclass(frozen=True)
class CustomActivity:
    """Activity multiplier defined by the user, e.g. "Construction Worker".

    Supplements the fixed ``ActivityLevel`` table. Held by the caller for
    the length of a session and never stored by the engine.

    Attributes:
        id: Unique identifier within the session
        name: Display name
        factor: BMR multiplier in [1.0, 3.0]
    """

    id: str
    name: str
    factor: float

    def __post_init__(self) -> None:
        """Validate name and factor.

        Raises:
            DomainViolationError: If name is blank or factor out of range
        """
        if not self.name or not self.name.strip():
            raise DomainViolationError("name", self.name, "cannot be empty")
        validate_activity_factor(self.factor)

    @staticmethod
    def create(name: str, factor: float) -> "CustomActivity":
        """Create a custom activity with a freshly generated id.

        Example:
            >>> activity = CustomActivity.create("Construction Worker", 1.8)
            >>> activity.factor
            1.8
        """
        return CustomActivity(id=uuid4().hex, name=name.strip(), factor=float(factor))

    def __str__(self) -> str:
        """String representation."""
        return f"{self.name} (x{self.factor})"
