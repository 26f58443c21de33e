"""Domain service: Combo/Category mapping.

Pure lookups tying a family member to the inventory category its garment
is drawn from, and a combo to the members it dresses.
"""

from __future__ import annotations

from combostore.domain.model.value_objects import (
    ADULT_SIZES,
    KIDS_SIZES,
    NOT_APPLICABLE,
    Category,
    ComboType,
    FamilyMember,
)

_MEMBER_CATEGORY: dict[FamilyMember, Category] = {
    FamilyMember.FATHER: Category.MEN,
    FamilyMember.MOTHER: Category.WOMEN,
    FamilyMember.SON: Category.BOYS,
    FamilyMember.DAUGHTER: Category.GIRLS,
}

_COMBO_MEMBERS: dict[ComboType, tuple[FamilyMember, ...]] = {
    ComboType.FAMILY: (
        FamilyMember.FATHER,
        FamilyMember.MOTHER,
        FamilyMember.SON,
        FamilyMember.DAUGHTER,
    ),
    ComboType.FATHER_SON: (FamilyMember.FATHER, FamilyMember.SON),
    ComboType.MOTHER_DAUGHTER: (FamilyMember.MOTHER, FamilyMember.DAUGHTER),
    ComboType.COUPLE: (FamilyMember.FATHER, FamilyMember.MOTHER),
}

_COMBO_LABELS: dict[ComboType, str] = {
    ComboType.FAMILY: "Complete Family Set",
    ComboType.FATHER_SON: "Father & Son",
    ComboType.MOTHER_DAUGHTER: "Mother & Daughter",
    ComboType.COUPLE: "Couple Set (M/F)",
}


def member_to_category(member: str | FamilyMember) -> Category:
    """Return the inventory category a member's garment comes from.

    Labels come from a closed UI vocabulary, so an unknown one is a
    programming error and raises ``ValueError``.
    """
    return _MEMBER_CATEGORY[FamilyMember(member)]


def combo_members(combo_type: str | ComboType) -> tuple[FamilyMember, ...]:
    return _COMBO_MEMBERS[ComboType.parse(combo_type)]


def combo_label(combo_type: str | ComboType) -> str:
    return _COMBO_LABELS[ComboType.parse(combo_type)]


def valid_sizes(category: str | Category) -> tuple[str, ...]:
    category = Category.parse(category)
    if category in (Category.MEN, Category.WOMEN):
        return ADULT_SIZES
    return KIDS_SIZES


def is_valid_size(member: str | FamilyMember, size: str) -> bool:
    """True if *size* can be ordered for *member* (``"N/A"`` always can)."""
    if size == NOT_APPLICABLE:
        return True
    return size in valid_sizes(member_to_category(member))
