"""Classification service wrapping the text and image classifiers."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from eco_lens.domain.classification import ImageClassification, TextClassification
from eco_lens.domain.report import TEXT_LABELS

_logger = logging.getLogger(__name__)


class ClassificationError(RuntimeError):
    """Raised when a classifier call fails or returns an unusable payload."""


class TextClassifier(Protocol):
    """Interface for zero-shot text classification."""

    async def classify(self, text: str, labels: Sequence[str]) -> object:
        """Score every candidate label independently and return raw output."""


class ImageClassifier(Protocol):
    """Interface for top-k image classification."""

    async def classify(self, image: object, top_k: int) -> object:
        """Return the raw top-k label distribution for an image."""


@dataclass
class ClassificationService:
    """Runs the classifiers and validates their output."""

    text_classifier: TextClassifier
    image_classifier: ImageClassifier
    labels: Sequence[str] = TEXT_LABELS
    top_k: int = 5
    debug: bool = False

    async def classify_text(self, text: str) -> TextClassification:
        """Classify text against the candidate label vocabulary."""
        try:
            raw = await self.text_classifier.classify(text, list(self.labels))
            result = TextClassification.model_validate(_normalize_text_output(raw))
        except Exception as exc:
            if self.debug:
                _logger.warning("Text classification failed: %s", exc)
            raise ClassificationError("Text classification failed") from exc
        if self.debug:
            _logger.info(
                "Text classification: top=%s score=%.3f",
                result.top.label,
                result.top.score,
            )
        return result

    async def classify_image(self, image: object) -> ImageClassification:
        """Classify an opaque image handle."""
        try:
            raw = await self.image_classifier.classify(image, self.top_k)
            result = ImageClassification.model_validate(_normalize_image_output(raw))
        except Exception as exc:
            if self.debug:
                _logger.warning("Image classification failed: %s", exc)
            raise ClassificationError("Image classification failed") from exc
        if self.debug:
            _logger.info(
                "Image classification: top=%s score=%.3f",
                result.top.label,
                result.top.score,
            )
        return result


def _normalize_text_output(raw: object) -> dict[str, object]:
    """Accept the payload shapes zero-shot backends produce.

    Pipelines return ``{"labels": [...], "scores": [...]}``, sometimes wrapped
    in a one-element list; hosted endpoints may return ``[{label, score}]``.
    """
    if isinstance(raw, list):
        if raw and isinstance(raw[0], dict) and "labels" in raw[0]:
            raw = raw[0]
        else:
            return {
                "labels": [item["label"] for item in raw],
                "scores": [item["score"] for item in raw],
            }
    if not isinstance(raw, dict):
        raise TypeError(f"Unexpected text classifier output: {type(raw).__name__}")
    return {"labels": raw.get("labels", []), "scores": raw.get("scores", [])}


def _normalize_image_output(raw: object) -> dict[str, object]:
    """Wrap a ranked list of ``{label, score}`` entries."""
    if isinstance(raw, dict) and "items" in raw:
        return raw
    return {"items": raw if raw is not None else []}
