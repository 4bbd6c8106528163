"""Environmental impact guidance per category."""

from dataclasses import dataclass

from eco_lens.domain.report import EcoAssessment


@dataclass(frozen=True)
class EcoRule:
    """Assessment shared by a group of categories."""

    categories: frozenset[str]
    assessment: EcoAssessment


ECO_RULES: tuple[EcoRule, ...] = (
    EcoRule(
        frozenset({"drink"}),
        EcoAssessment(
            packaging="Likely plastic/aluminum bottle or can",
            footprint="Medium (beverage processing + packaging)",
            recycle="Prefer aluminum can or reusable bottle",
        ),
    ),
    EcoRule(
        frozenset({"fruit", "vegetable"}),
        EcoAssessment(
            packaging="Minimal; avoid plastic wrap when possible",
            footprint="Low to medium (transport dependent)",
            recycle="Compost organic waste",
        ),
    ),
    EcoRule(
        frozenset({"snack", "dairy", "food product", "meat"}),
        EcoAssessment(
            packaging="Often plastic/laminate; hard to recycle",
            footprint="Medium to high (processing, cold chain for dairy/meat)",
            recycle="Check local rules; reduce single-use packaging",
        ),
    ),
    EcoRule(
        frozenset({"cosmetic", "cleaning product", "electronic device", "battery"}),
        EcoAssessment(
            packaging="Plastic or mixed materials",
            footprint="Medium",
            recycle="Take to proper e-waste/hazard drop-off if applicable",
        ),
    ),
)

DEFAULT_ASSESSMENT = EcoAssessment(
    packaging="Unknown",
    footprint="Unknown",
    recycle="Check local guidance",
)


def assess_eco(category: str) -> EcoAssessment:
    """Return packaging, footprint and recycling guidance for a category."""
    key = str(category).lower()
    for rule in ECO_RULES:
        if key in rule.categories:
            return rule.assessment
    return DEFAULT_ASSESSMENT
