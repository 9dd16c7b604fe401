"""Sex value object - selects the sex-specific formula constants."""

from enum import Enum
from typing import Union

from ..exceptions.domain_errors import DomainViolationError


class Sex(str, Enum):
    """Biological sex used by the body metric equations."""

    MALE = "male"
    FEMALE = "female"

    @classmethod
    def parse(cls, value: Union["Sex", str]) -> "Sex":
        """Parse a sex from an enum member or a string.

        Accepts "male"/"female" and the short forms "M"/"F", in any case.

        Raises:
            DomainViolationError: If value names neither sex

        Example:
            >>> Sex.parse("F")
            <Sex.FEMALE: 'female'>
        """
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        aliases = {"m": cls.MALE, "f": cls.FEMALE}
        if normalized in aliases:
            return aliases[normalized]
        try:
            return cls(normalized)
        except ValueError:
            raise DomainViolationError("gender", value, "expected male or female") from None
