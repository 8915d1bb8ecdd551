"""
Static scoring tables for the WHODAS 2.0 simple (additive) scoring.

Item names follow the pattern D{domain}_{item}. Domain 5 is split into the four
household items (Do51) and the four optional remunerated work items (Do52).

Nomenclature:
category = raw answer on the 5-level severity scale (or missing)
item score = recoded integer value of a single category
raw sum = sum of item scores of a domain (or overall)
score = raw sum rescaled to 0-100
"""

from enum import Enum


class Category(Enum):
    """Ordinal response levels of a WHODAS item, including an explicit missing one."""

    NONE = "None"
    MILD = "Mild"
    MODERATE = "Moderate"
    SEVERE = "Severe"
    EXTREME = "Extreme or cannot do"
    MISSING = None

    @property
    def position(self) -> int | None:
        """0-based ordinal position (None=0 ... Extreme=4), None if missing."""
        if self is Category.MISSING:
            return None
        return ANSWERED_CATEGORIES.index(self)

    @classmethod
    def parse(cls, value) -> "Category":
        """
        Map a raw answer to its category. Case and surrounding whitespace are
        ignored; anything that is not one of the five labels is MISSING.
        """
        if isinstance(value, Category):
            return value
        if value is None:
            return cls.MISSING
        return _CATEGORY_BY_LABEL.get(str(value).strip().lower(), cls.MISSING)


ANSWERED_CATEGORIES = [
    Category.NONE,
    Category.MILD,
    Category.MODERATE,
    Category.SEVERE,
    Category.EXTREME,
]
_CATEGORY_BY_LABEL = {
    category.value.lower(): category for category in ANSWERED_CATEGORIES
}


class RecodeClass(Enum):
    """Item scores per ordinal position (None, Mild, Moderate, Severe, Extreme)."""

    GENERAL = (0, 1, 2, 3, 4)
    SPECIFIC = (0, 1, 1, 2, 2)

    @property
    def max_score(self) -> int:
        return self.value[-1]

    def recode(self, category: Category) -> int | None:
        if category is Category.MISSING:
            return None
        return self.value[category.position]


SPECIFIC_ITEMS = frozenset(
    [
        "D1_5", "D1_6",
        "D2_2", "D2_3",
        "D3_1", "D3_3", "D3_4",
        "D4_1", "D4_2", "D4_3", "D4_5",
        "D5_2", "D5_3", "D5_5", "D5_8",
        "D6_1", "D6_3", "D6_6", "D6_8",
    ]
)  # fmt: skip

DOMAIN_ITEMS = {
    "Do1": [f"D1_{i}" for i in range(1, 7)],
    "Do2": [f"D2_{i}" for i in range(1, 6)],
    "Do3": [f"D3_{i}" for i in range(1, 5)],
    "Do4": [f"D4_{i}" for i in range(1, 6)],
    "Do51": [f"D5_{i}" for i in range(2, 6)],
    "Do52": [f"D5_{i}" for i in range(8, 12)],  # remunerated work
    "Do6": [f"D6_{i}" for i in range(1, 9)],
}
WORK_DOMAINS = ["Do52"]

RECODE_CLASSES = {
    item: RecodeClass.SPECIFIC if item in SPECIFIC_ITEMS else RecodeClass.GENERAL
    for items in DOMAIN_ITEMS.values()
    for item in items
}

# Maximum attainable raw sums, used as rescaling denominators
MAX_RAW_SCORES = {
    "Do1": 20,
    "Do2": 16,
    "Do3": 10,
    "Do4": 12,
    "Do51": 10,
    "Do52": 14,
    "Do6": 24,
    "st_s32": 92,
    "st_s36": 106,
}


def domain_items(include_work_items: bool = False) -> dict[str, list[str]]:
    """Domain score columns and their items, without Do52 unless requested."""
    return {
        domain: items
        for domain, items in DOMAIN_ITEMS.items()
        if include_work_items or domain not in WORK_DOMAINS
    }


def required_items(include_work_items: bool = False) -> list[str]:
    """Ordered item names that must be present in the input (32 or 36)."""
    return [
        item for items in domain_items(include_work_items).values() for item in items
    ]


def overall_columns(include_work_items: bool = False) -> list[str]:
    return ["st_s32", "st_s36"] if include_work_items else ["st_s32"]


def score_columns(include_work_items: bool = False) -> list[str]:
    """Columns added to the respondent table by the scorer."""
    return list(domain_items(include_work_items)) + overall_columns(
        include_work_items
    )
