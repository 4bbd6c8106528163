"""Sustainability analysis: fuses classifier signals into a report."""

import asyncio
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import SimpleNamespace
from typing import Any

from eco_lens.domain.classification import (
    ImageClassification,
    LabelScore,
    TextClassification,
)
from eco_lens.domain.report import AnalysisRequest, SustainabilityReport
from eco_lens.services.advice import suggest_alternatives, suggest_tips
from eco_lens.services.categories import driving_label, map_category
from eco_lens.services.classifiers import ClassificationService
from eco_lens.services.confidence import aggregate_confidence, to_percent
from eco_lens.services.eco import assess_eco
from eco_lens.services.edibility import decide_edibility
from eco_lens.services.keywords import extract_keywords
from eco_lens.services.nutrition import estimate_nutrition

NO_SIGNALS = "No model signals available."
EXPLANATION_UNAVAILABLE = "Explanation unavailable."

_logger = logging.getLogger(__name__)


@dataclass
class SustainabilityAnalyzer:
    """Builds sustainability reports from text and image input."""

    classification_service: ClassificationService
    debug: bool = False

    async def analyze(self, request: AnalysisRequest) -> SustainabilityReport:
        """Classify the input and fuse the signals into a report.

        Classifier failures propagate as ``ClassificationError``; no partial
        report is produced.
        """
        text = request.text or ""
        image_name = request.image_name or ""
        keywords = extract_keywords(text + " " + image_name)

        text_result, image_result = await self._classify(text, request.image)
        text_top = text_result.top if text_result is not None else None
        image_top = image_result.top if image_result is not None else None

        edible = decide_edibility(text_top, image_top, keywords)
        category = map_category(driving_label(text_top, image_top), text_top)
        report = SustainabilityReport(
            text=text,
            image_name=image_name,
            location=request.location or "",
            text_top=text_top,
            image_top=image_top,
            edible=edible,
            category=category,
            nutrition=estimate_nutrition(category, edible.is_edible),
            eco=assess_eco(category),
            alternatives=suggest_alternatives(category),
            tips=suggest_tips(keywords),
            overall_confidence=aggregate_confidence(
                text_top.score if text_top is not None else None,
                image_top.score if image_top is not None else None,
                edible.confidence,
            ),
        )
        if self.debug:
            _logger.info(
                "Analysis: category=%s edible=%s confidence=%s",
                category.value,
                edible.is_edible,
                report.overall_confidence,
            )
        return report

    async def _classify(
        self, text: str, image: object | None
    ) -> tuple[TextClassification | None, ImageClassification | None]:
        """Run whichever classifiers have input, concurrently."""
        service = self.classification_service
        has_text = bool(text.strip())
        has_image = image is not None
        if has_text and has_image:
            text_result, image_result = await asyncio.gather(
                service.classify_text(text), service.classify_image(image)
            )
            return text_result, image_result
        if has_text:
            return await service.classify_text(text), None
        if has_image:
            return None, await service.classify_image(image)
        return None, None


def explain(report: object) -> str:
    """Summarize the model signals of a report in one line. Never raises."""
    try:
        lines: list[str] = []
        if isinstance(report, Mapping):
            report = _from_wire(report)
        text_top = getattr(report, "text_top", None)
        image_top = getattr(report, "image_top", None)
        edible = getattr(report, "edible", None)
        if text_top:
            lines.append(f"Text suggests: {_describe(text_top)}")
        if image_top:
            lines.append(f"Image suggests: {_describe(image_top)}")
        if edible:
            verdict = "likely edible" if edible.is_edible else "likely not edible"
            lines.append(f"Edible decision: {verdict} (conf {edible.confidence}%)")
        if not lines:
            return NO_SIGNALS
        return " • ".join(lines)
    except Exception:
        _logger.debug("Failed to render explanation", exc_info=True)
        return EXPLANATION_UNAVAILABLE


def _describe(signal: LabelScore) -> str:
    return f'"{signal.label}" ({to_percent(signal.score)}%)'


def _from_wire(data: Mapping[str, Any]) -> SimpleNamespace:
    """Read the signals of a report given in its JSON wire shape."""
    signals = data.get("model") or {}
    edible = data.get("edible")
    return SimpleNamespace(
        text_top=_wire_signal(signals.get("textTop")),
        image_top=_wire_signal(signals.get("imageTop")),
        edible=(
            SimpleNamespace(
                is_edible=edible.get("isEdible"), confidence=edible.get("confidence")
            )
            if edible
            else None
        ),
    )


def _wire_signal(value: Mapping[str, Any] | None) -> SimpleNamespace | None:
    if not value:
        return None
    return SimpleNamespace(label=value.get("label"), score=value.get("score"))
