"""On-device classifiers backed by Hugging Face transformers pipelines."""

import asyncio
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from eco_lens.services.classifiers import ImageClassifier, TextClassifier
from eco_lens.services.pipelines import SingleFlight

PipelineFactory = Callable[..., Callable[..., object]]


@dataclass(frozen=True)
class ClassifierPipelines:
    """Loaded zero-shot text and image classification pipelines."""

    text: Callable[..., object]
    image: Callable[..., object]


def _default_factory() -> PipelineFactory:
    from transformers import pipeline

    return pipeline


def build_pipeline_loader(
    text_model: str,
    image_model: str,
    factory: PipelineFactory | None = None,
) -> SingleFlight[ClassifierPipelines]:
    """Create the shared single-flight loader for both pipelines."""

    def _build() -> ClassifierPipelines:
        create = factory or _default_factory()
        return ClassifierPipelines(
            text=create("zero-shot-classification", model=text_model),
            image=create("image-classification", model=image_model),
        )

    async def _load() -> ClassifierPipelines:
        return await asyncio.to_thread(_build)

    return SingleFlight(loader=_load, name="classifier pipelines")


@dataclass
class TransformersTextClassifier(TextClassifier):
    """Zero-shot text classification with multi-label scoring."""

    pipelines: SingleFlight[ClassifierPipelines]

    async def classify(self, text: str, labels: Sequence[str]) -> object:
        """Run the zero-shot pipeline in a worker thread."""
        loaded = await self.pipelines.get()
        return await asyncio.to_thread(
            loaded.text, text, candidate_labels=list(labels), multi_label=True
        )


@dataclass
class TransformersImageClassifier(ImageClassifier):
    """Top-k image classification; the image handle is passed through."""

    pipelines: SingleFlight[ClassifierPipelines]

    async def classify(self, image: object, top_k: int) -> object:
        """Run the image pipeline in a worker thread."""
        loaded = await self.pipelines.get()
        return await asyncio.to_thread(loaded.image, image, top_k=top_k)
