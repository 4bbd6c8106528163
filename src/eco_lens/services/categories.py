"""Mapping of arbitrary classifier labels onto coarse categories."""

from dataclasses import dataclass

from eco_lens.domain.classification import UNKNOWN_LABEL, LabelScore
from eco_lens.domain.report import TEXT_LABELS, Category


@dataclass(frozen=True)
class CategoryRule:
    """Substring patterns that select a category."""

    category: Category
    patterns: tuple[str, ...]

    def matches(self, label: str) -> bool:
        return any(pattern in label for pattern in self.patterns)


# Order matters: the first matching rule wins.
CATEGORY_RULES: tuple[CategoryRule, ...] = (
    CategoryRule(Category.FRUIT, ("banana", "apple", "orange", "fruit")),
    CategoryRule(
        Category.VEGETABLE, ("tomato", "potato", "vegetable", "cabbage", "carrot")
    ),
    CategoryRule(Category.DAIRY, ("milk", "yogurt", "cheese", "dairy")),
    CategoryRule(Category.MEAT, ("meat", "beef", "chicken", "pork", "fish", "tuna")),
    CategoryRule(
        Category.DRINK,
        (
            "drink",
            "beverage",
            "bottle",
            "can",
            "juice",
            "soda",
            "coffee",
            "tea",
            "water",
        ),
    ),
    CategoryRule(
        Category.SNACK,
        ("snack", "chips", "chocolate", "cookie", "biscuit", "candy", "bar"),
    ),
    CategoryRule(
        Category.CLEANING_PRODUCT,
        ("detergent", "cleaner", "soap", "shampoo", "bleach"),
    ),
    CategoryRule(
        Category.ELECTRONIC_DEVICE,
        ("phone", "laptop", "camera", "electronic", "remote", "battery"),
    ),
    CategoryRule(
        Category.COSMETIC, ("lipstick", "cream", "cosmetic", "makeup", "lotion")
    ),
    CategoryRule(
        Category.CLOTHING, ("shirt", "jacket", "shoe", "clothing", "t-shirt")
    ),
)

_CATEGORY_VALUES = frozenset(category.value for category in Category)


def driving_label(text_top: LabelScore | None, image_top: LabelScore | None) -> str:
    """Pick the label that drives category mapping, text first."""
    if text_top is not None and text_top.label:
        return text_top.label
    if image_top is not None and image_top.label:
        return image_top.label
    return UNKNOWN_LABEL


def map_category(label: str, text_top: LabelScore | None = None) -> Category:
    """Collapse a label into a coarse category.

    When no rule matches, a text label that is itself a category is used
    as-is; anything else lands in ``food product``.
    """
    lowered = label.lower()
    for rule in CATEGORY_RULES:
        if rule.matches(lowered):
            return rule.category
    if (
        text_top is not None
        and text_top.label in TEXT_LABELS
        and text_top.label in _CATEGORY_VALUES
    ):
        return Category(text_top.label)
    return Category.FOOD_PRODUCT
