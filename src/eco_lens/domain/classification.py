"""Models for classifier outputs."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator

UNKNOWN_LABEL = "unknown"


class LabelScore(BaseModel):
    """Single label with its classifier score."""

    model_config = ConfigDict(frozen=True)

    label: str
    score: float = Field(ge=0.0, le=1.0)


class TextClassification(BaseModel):
    """Zero-shot text classification over a fixed label vocabulary."""

    model_config = ConfigDict(frozen=True)

    labels: list[str]
    scores: list[Annotated[float, Field(ge=0.0, le=1.0)]]

    @model_validator(mode="after")
    def _check_alignment(self) -> "TextClassification":
        if len(self.labels) != len(self.scores):
            raise ValueError("labels and scores must have the same length")
        if len(set(self.labels)) != len(self.labels):
            raise ValueError("labels must be unique")
        return self

    @property
    def top(self) -> LabelScore:
        """Highest-scoring label; the earliest entry wins ties."""
        if not self.labels:
            return LabelScore(label=UNKNOWN_LABEL, score=0.0)
        best = max(range(len(self.scores)), key=lambda index: self.scores[index])
        return LabelScore(label=self.labels[best], score=self.scores[best])


class ImageClassification(BaseModel):
    """Top-k image classification with an open label vocabulary."""

    model_config = ConfigDict(frozen=True)

    items: list[LabelScore]

    @property
    def top(self) -> LabelScore:
        """First ranked label, or an unknown placeholder."""
        if not self.items:
            return LabelScore(label=UNKNOWN_LABEL, score=0.0)
        return self.items[0]
