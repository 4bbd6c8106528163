"""Alternatives and contextual tips."""

from collections.abc import Iterable

ALTERNATIVES: dict[str, tuple[str, ...]] = {
    "drink": (
        "Use a reusable bottle",
        "Choose aluminum cans over plastic when possible",
    ),
    "snack": (
        "Buy in bulk to reduce packaging",
        "Choose snacks in paper or compostable wrapping",
    ),
    "meat": (
        "Try one meatless day per week",
        "Choose poultry or fish over red meat for lower footprint",
    ),
    "cosmetic": (
        "Refill stations if available",
        "Choose products with minimal packaging",
    ),
    "cleaning product": (
        "Concentrates or refills",
        "Use vinegar/baking soda for some tasks",
    ),
    "electronic device": (
        "Repair before replacing",
        "Buy refurbished where possible",
    ),
    "battery": (
        "Use rechargeable batteries",
        "Recycle at e-waste centers",
    ),
}

_FRESH_FOOD_CATEGORIES = frozenset({"fruit", "vegetable", "dairy", "food product"})
_FRESH_FOOD_ALTERNATIVES = (
    "Prefer local/seasonal options",
    "Choose minimal packaging",
)
_GENERIC_ALTERNATIVES = (
    "Consider products with eco-labels",
    "Reduce single-use packaging",
)

# (keywords, tips); the first entry sharing a keyword wins.
TIP_RULES: tuple[tuple[frozenset[str], tuple[str, ...]], ...] = (
    (
        frozenset({"bottle"}),
        ("Carry a reusable bottle", "Avoid single-use plastics"),
    ),
    (frozenset({"battery"}), ("Collect used batteries for proper recycling",)),
    (frozenset({"tuna", "fish"}), ("Look for MSC-certified seafood",)),
    (frozenset({"beef", "meat"}), ("Moderate red meat intake to lower emissions",)),
)
DEFAULT_TIPS = ("Check your local recycling guide for specific rules",)


def suggest_alternatives(category: str) -> tuple[str, ...]:
    """Return substitution ideas for a category."""
    key = str(category).lower()
    if key in ALTERNATIVES:
        return ALTERNATIVES[key]
    if key in _FRESH_FOOD_CATEGORIES:
        return _FRESH_FOOD_ALTERNATIVES
    return _GENERIC_ALTERNATIVES


def suggest_tips(keywords: Iterable[str]) -> tuple[str, ...]:
    """Return a contextual tip based on keywords alone."""
    words = set(keywords)
    for triggers, tips in TIP_RULES:
        if not words.isdisjoint(triggers):
            return tips
    return DEFAULT_TIPS
