"""Trait category taxonomy.

A closed set of twelve categories. Labels and descriptions are static and
resolved with an exhaustive ``match``, so adding a member without a
description fails loudly rather than falling back to a generic string.
"""

from enum import StrEnum

from persona.domain.shared.error import UnknownCategory
from persona.domain.shared.model.value import ValueObject


class TraitCategory(StrEnum):
    CONFIDENCE = "CONFIDENCE"
    COMMUNICATION = "COMMUNICATION"
    LEADERSHIP = "LEADERSHIP"
    CREATIVITY = "CREATIVITY"
    EMPATHY = "EMPATHY"
    HUMOR = "HUMOR"
    ASSERTIVENESS = "ASSERTIVENESS"
    CHARISMA = "CHARISMA"
    PATIENCE = "PATIENCE"
    NEGOTIATION = "NEGOTIATION"
    PUBLIC_SPEAKING = "PUBLIC_SPEAKING"
    OTHER = "OTHER"

    @property
    def label(self) -> str:
        """Title-cased display label, e.g. ``Public Speaking``."""
        return " ".join(word.capitalize() for word in self.value.replace("-", "_").split("_"))

    @property
    def description(self) -> str:
        match self:
            case TraitCategory.CONFIDENCE:
                return "Self-assurance and belief in one's abilities"
            case TraitCategory.COMMUNICATION:
                return "Clear and effective expression of ideas"
            case TraitCategory.LEADERSHIP:
                return "Ability to guide and inspire others"
            case TraitCategory.CREATIVITY:
                return "Innovation and original thinking"
            case TraitCategory.EMPATHY:
                return "Understanding and sharing others' feelings"
            case TraitCategory.HUMOR:
                return "Wit and ability to find/create comedy"
            case TraitCategory.ASSERTIVENESS:
                return "Standing up for oneself respectfully"
            case TraitCategory.CHARISMA:
                return "Personal magnetism and charm"
            case TraitCategory.PATIENCE:
                return "Calm persistence and tolerance"
            case TraitCategory.NEGOTIATION:
                return "Reaching mutually beneficial agreements"
            case TraitCategory.PUBLIC_SPEAKING:
                return "Confident presentation to groups"
            case TraitCategory.OTHER:
                return "Miscellaneous personality traits"


class CategoryInfo(ValueObject):
    """One entry of the public category catalog."""

    value: TraitCategory
    label: str
    description: str


def parse_category(raw: str, field: str = "category") -> TraitCategory:
    """Resolve a raw string to a category. Raises UnknownCategory otherwise."""
    try:
        return TraitCategory(raw)
    except ValueError:
        raise UnknownCategory(raw, field=field) from None


CATEGORY_CATALOG: tuple[CategoryInfo, ...] = tuple(
    CategoryInfo(value=c, label=c.label, description=c.description) for c in TraitCategory
)
