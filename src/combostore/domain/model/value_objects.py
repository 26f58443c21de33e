"""Value Objects shared across the domain.

The catalog works with a closed vocabulary: four inventory categories,
two fixed size ladders, four family members and four combos. Keeping
them as enums means an unknown label fails at the edge instead of
silently creating a new inventory cell.
"""

from __future__ import annotations

import secrets
import string
import time
from enum import Enum

from combostore.domain.exceptions import ValidationError


class Category(Enum):
    MEN = "men"
    WOMEN = "women"
    BOYS = "boys"
    GIRLS = "girls"

    @staticmethod
    def parse(value: str | Category) -> Category:
        if isinstance(value, Category):
            return value
        try:
            return Category(value)
        except ValueError as exc:
            raise ValidationError(f"Unknown inventory category: {value!r}") from exc


class FamilyMember(Enum):
    FATHER = "Father"
    MOTHER = "Mother"
    SON = "Son"
    DAUGHTER = "Daughter"


class ComboType(Enum):
    FAMILY = "F-M-S-D"
    FATHER_SON = "F-S"
    MOTHER_DAUGHTER = "M-D"
    COUPLE = "F-M"

    @staticmethod
    def parse(value: str | ComboType) -> ComboType:
        if isinstance(value, ComboType):
            return value
        try:
            return ComboType(value)
        except ValueError as exc:
            raise ValidationError(f"Unknown combo type: {value!r}") from exc


class ChildType(Enum):
    BOYS = "boys"
    GIRLS = "girls"
    UNISEX = "unisex"
    NONE = "none"


# ---------------------------------------------------------------------------
# Size ladders (display order matters)
# ---------------------------------------------------------------------------
ADULT_SIZES: tuple[str, ...] = ("M", "L", "XL", "XXL", "3XL")
KIDS_SIZES: tuple[str, ...] = (
    "0-1", "1-2", "2-3", "3-4", "4-5", "5-6",
    "6-7", "7-8", "9-10", "11-12", "13-14",
)

# A member who opts out of the combo.
NOT_APPLICABLE = "N/A"

UNKNOWN_DESIGN = "Unknown Design"
DEFAULT_COUNTRY_CODE = "+91"

_ID_ALPHABET = string.ascii_lowercase + string.digits


def new_id(length: int = 9) -> str:
    """Short random base-36 identifier, same shape as the storefront's ids."""
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(length))


def now_ms() -> int:
    return int(time.time() * 1000)
