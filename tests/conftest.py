"""Shared test fixtures."""

from collections.abc import Sequence
from dataclasses import dataclass, field

import pytest

from eco_lens.config import Settings
from eco_lens.containers import AppContainer
from eco_lens.services.analyzer import SustainabilityAnalyzer
from eco_lens.services.classifiers import (
    ClassificationService,
    ImageClassifier,
    TextClassifier,
)


@dataclass
class FakeTextClassifier(TextClassifier):
    """Fake zero-shot classifier returning a fixed distribution."""

    labels: list[str] = field(default_factory=lambda: ["food product", "drink"])
    scores: list[float] = field(default_factory=lambda: [0.9, 0.4])
    calls: list[tuple[str, list[str]]] = field(default_factory=list)

    async def classify(self, text: str, labels: Sequence[str]) -> object:
        self.calls.append((text, list(labels)))
        return {"sequence": text, "labels": self.labels, "scores": self.scores}


@dataclass
class FakeImageClassifier(ImageClassifier):
    """Fake image classifier returning a fixed ranked list."""

    items: list[dict[str, object]] = field(
        default_factory=lambda: [
            {"label": "banana", "score": 0.92},
            {"label": "lemon", "score": 0.03},
        ]
    )
    calls: list[tuple[object, int]] = field(default_factory=list)

    async def classify(self, image: object, top_k: int) -> object:
        self.calls.append((image, top_k))
        return self.items[:top_k]


@dataclass
class FailingClassifier(TextClassifier, ImageClassifier):
    """Classifier that always raises."""

    error: Exception = field(default_factory=lambda: RuntimeError("model offline"))

    async def classify(self, *args: object, **kwargs: object) -> object:
        raise self.error


def make_analyzer(
    text_classifier: TextClassifier | None = None,
    image_classifier: ImageClassifier | None = None,
) -> SustainabilityAnalyzer:
    service = ClassificationService(
        text_classifier=text_classifier or FakeTextClassifier(),
        image_classifier=image_classifier or FakeImageClassifier(),
    )
    return SustainabilityAnalyzer(classification_service=service)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        inference_backend="local",
        text_model="test/text-model",
        image_model="test/image-model",
    )


@pytest.fixture
def text_classifier() -> FakeTextClassifier:
    return FakeTextClassifier()


@pytest.fixture
def image_classifier() -> FakeImageClassifier:
    return FakeImageClassifier()


@pytest.fixture
def container(
    settings: Settings,
    text_classifier: FakeTextClassifier,
    image_classifier: FakeImageClassifier,
) -> AppContainer:
    classification_service = ClassificationService(
        text_classifier=text_classifier,
        image_classifier=image_classifier,
        top_k=settings.image_top_k,
    )
    analyzer = SustainabilityAnalyzer(classification_service=classification_service)

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        classification_service=classification_service,
        analyzer=analyzer,
        close_resources=close_resources,
    )
