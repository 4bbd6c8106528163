"""Edibility decision from image labels and keywords."""

import re
from collections.abc import Iterable

from eco_lens.domain.classification import LabelScore
from eco_lens.domain.report import EdibilityVerdict
from eco_lens.services.confidence import to_percent

EDIBLE_IMAGE_PATTERN = re.compile(
    r"banana|apple|orange|fruit|vegetable|food|drink|beverage|bread|pizza"
    r"|burger|sandwich|milk|coffee|tea|chocolate|snack",
    re.IGNORECASE,
)

EDIBLE_HINTS = frozenset(
    {
        "food",
        "fruit",
        "vegetable",
        "snack",
        "drink",
        "beverage",
        "meat",
        "chicken",
        "fish",
        "tuna",
        "bread",
        "rice",
        "pasta",
        "milk",
        "dairy",
        "cheese",
        "yogurt",
        "chocolate",
        "candy",
        "juice",
        "water",
        "coffee",
        "tea",
        "cookie",
        "biscuit",
        "banana",
        "apple",
        "orange",
        "tomato",
        "potato",
    }
)

NON_EDIBLE_HINTS = frozenset(
    {
        "detergent",
        "bleach",
        "cleaner",
        "soap",
        "shampoo",
        "conditioner",
        "lotion",
        "cream",
        "cosmetic",
        "makeup",
        "electronics",
        "phone",
        "laptop",
        "battery",
        "remote",
        "toy",
        "clothes",
        "tshirt",
        "shirt",
        "jacket",
        "shoe",
        "paint",
        "glue",
        "pill",
        "medicine",
        "medication",
        "drug",
        "supplement",
    }
)

_BASE_SCORE = 0.5
_IMAGE_SCORE = 0.8
_KEYWORD_SCORE = 0.75


def decide_edibility(
    text_top: LabelScore | None,
    image_top: LabelScore | None,
    keywords: Iterable[str],
) -> EdibilityVerdict:
    """Decide whether the item is edible.

    Rules run in a fixed order: image label, edible keywords, non-edible
    keywords. Each matching rule overwrites the verdict, so non-edible
    keywords always have the last word. The score only ever rises.
    ``text_top`` does not take part in the decision.
    """
    words = set(keywords)
    is_edible = False
    score = _BASE_SCORE

    if image_top is not None and EDIBLE_IMAGE_PATTERN.search(image_top.label):
        is_edible = True
        score = max(score, _IMAGE_SCORE)
    if not words.isdisjoint(EDIBLE_HINTS):
        is_edible = True
        score = max(score, _KEYWORD_SCORE)
    if not words.isdisjoint(NON_EDIBLE_HINTS):
        is_edible = False
        score = max(score, _KEYWORD_SCORE)

    return EdibilityVerdict(is_edible=is_edible, confidence=to_percent(score))
