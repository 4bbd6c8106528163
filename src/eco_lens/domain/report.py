"""Sustainability report domain models."""

from dataclasses import dataclass, field
from enum import StrEnum

from eco_lens.domain.classification import LabelScore


class Category(StrEnum):
    """Coarse product buckets that drive every downstream lookup."""

    FRUIT = "fruit"
    VEGETABLE = "vegetable"
    DAIRY = "dairy"
    MEAT = "meat"
    DRINK = "drink"
    SNACK = "snack"
    CLEANING_PRODUCT = "cleaning product"
    ELECTRONIC_DEVICE = "electronic device"
    COSMETIC = "cosmetic"
    CLOTHING = "clothing"
    FOOD_PRODUCT = "food product"


TEXT_LABELS: tuple[str, ...] = (
    "food product",
    "drink",
    "fruit",
    "vegetable",
    "snack",
    "dairy",
    "meat",
    "cosmetic",
    "cleaning product",
    "electronic device",
    "toy",
    "clothing",
    "medication",
    "plastic packaging",
    "battery",
)

_EDIBLE_EXPLANATION = (
    "Inferred from model predictions and keywords indicating food/edible items."
)
_NON_EDIBLE_EXPLANATION = (
    "Inferred from model predictions or keywords indicating non-food items."
)


@dataclass(frozen=True)
class AnalysisRequest:
    """Raw input for a single analysis call.

    ``image`` is an opaque handle (bytes, file object, decoded image, URL or
    data URL) handed to the image classifier unchanged.
    """

    text: str = ""
    image: object | None = None
    image_name: str = ""
    location: str = ""


@dataclass(frozen=True)
class EdibilityVerdict:
    """Edible/non-edible decision with a 0-100 confidence."""

    is_edible: bool
    confidence: int

    @property
    def explain(self) -> str:
        return _EDIBLE_EXPLANATION if self.is_edible else _NON_EDIBLE_EXPLANATION


@dataclass(frozen=True)
class NutritionEstimate:
    """Rough nutrition profile per 100 g."""

    kcal: float
    protein_g: float
    fat_g: float
    carbs_g: float
    per100g: bool = True


@dataclass(frozen=True)
class EcoAssessment:
    """Packaging, footprint and recycling guidance."""

    packaging: str
    footprint: str
    recycle: str


@dataclass(frozen=True)
class SustainabilityReport:
    """Fused result of one analysis call."""

    text: str
    image_name: str
    location: str
    text_top: LabelScore | None
    image_top: LabelScore | None
    edible: EdibilityVerdict
    category: Category
    nutrition: NutritionEstimate | None
    eco: EcoAssessment
    alternatives: tuple[str, ...] = field(default_factory=tuple)
    tips: tuple[str, ...] = field(default_factory=tuple)
    overall_confidence: int = 0

    def to_dict(self) -> dict[str, object]:
        """Render the report in its JSON wire shape."""
        nutrition: dict[str, object] | None = None
        if self.nutrition is not None:
            nutrition = {
                "per100g": self.nutrition.per100g,
                "kcal": self.nutrition.kcal,
                "protein_g": self.nutrition.protein_g,
                "fat_g": self.nutrition.fat_g,
                "carbs_g": self.nutrition.carbs_g,
            }
        return {
            "input": {
                "text": self.text,
                "imageName": self.image_name,
                "location": self.location,
            },
            "model": {
                "textTop": _label_score_dict(self.text_top),
                "imageTop": _label_score_dict(self.image_top),
            },
            "edible": {
                "isEdible": self.edible.is_edible,
                "confidence": self.edible.confidence,
                "explain": self.edible.explain,
            },
            "category": self.category.value,
            "nutrition": nutrition,
            "eco": {
                "packaging": self.eco.packaging,
                "footprint": self.eco.footprint,
                "recycle": self.eco.recycle,
            },
            "alternatives": list(self.alternatives),
            "tips": list(self.tips),
            "overallConfidence": self.overall_confidence,
        }


def _label_score_dict(value: LabelScore | None) -> dict[str, object] | None:
    if value is None:
        return None
    return {"label": value.label, "score": value.score}
