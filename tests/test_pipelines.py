"""Tests for lazy pipeline loading and the transformers adapters."""

import asyncio

import pytest

from eco_lens.adapters.transformers_classifiers import (
    TransformersImageClassifier,
    TransformersTextClassifier,
    build_pipeline_loader,
)
from eco_lens.services.pipelines import SingleFlight


def test_concurrent_callers_share_one_load() -> None:
    loads: list[int] = []

    async def loader() -> dict[str, int]:
        loads.append(1)
        await asyncio.sleep(0.01)
        return {"handle": len(loads)}

    resource: SingleFlight[dict[str, int]] = SingleFlight(loader=loader)

    async def scenario() -> list[dict[str, int]]:
        first = await asyncio.gather(*(resource.get() for _ in range(5)))
        again = await resource.get()
        return [*first, again]

    results = asyncio.run(scenario())

    assert len(loads) == 1
    assert all(result is results[0] for result in results)
    assert resource.ready


def test_failed_load_is_retried_by_next_caller() -> None:
    attempts: list[int] = []

    async def loader() -> str:
        attempts.append(1)
        if len(attempts) == 1:
            raise RuntimeError("download failed")
        return "pipelines"

    resource: SingleFlight[str] = SingleFlight(loader=loader)

    async def scenario() -> str:
        with pytest.raises(RuntimeError):
            await resource.get()
        assert not resource.ready
        return await resource.get()

    assert asyncio.run(scenario()) == "pipelines"
    assert len(attempts) == 2


class _RecordingFactory:
    def __init__(self) -> None:
        self.created: list[tuple[str, str]] = []
        self.text_calls: list[tuple[str, dict[str, object]]] = []
        self.image_calls: list[tuple[object, dict[str, object]]] = []

    def __call__(self, task: str, model: str):  # type: ignore[no-untyped-def]
        self.created.append((task, model))
        if task == "zero-shot-classification":

            def text_pipeline(text, **kwargs):  # type: ignore[no-untyped-def]
                self.text_calls.append((text, kwargs))
                return {"sequence": text, "labels": ["drink"], "scores": [0.8]}

            return text_pipeline

        def image_pipeline(image, **kwargs):  # type: ignore[no-untyped-def]
            self.image_calls.append((image, kwargs))
            return [{"label": "water bottle", "score": 0.7}]

        return image_pipeline


def test_transformers_classifiers_load_pipelines_once() -> None:
    factory = _RecordingFactory()
    pipelines = build_pipeline_loader("text/model", "image/model", factory=factory)
    text_classifier = TransformersTextClassifier(pipelines)
    image_classifier = TransformersImageClassifier(pipelines)

    async def scenario() -> tuple[object, object]:
        return await asyncio.gather(
            text_classifier.classify("cold brew", ["drink", "snack"]),
            image_classifier.classify("https://example.test/a.jpg", 5),
        )

    text_out, image_out = asyncio.run(scenario())

    assert factory.created == [
        ("zero-shot-classification", "text/model"),
        ("image-classification", "image/model"),
    ]
    assert factory.text_calls == [
        ("cold brew", {"candidate_labels": ["drink", "snack"], "multi_label": True})
    ]
    assert factory.image_calls == [("https://example.test/a.jpg", {"top_k": 5})]
    assert text_out == {"sequence": "cold brew", "labels": ["drink"], "scores": [0.8]}
    assert image_out == [{"label": "water bottle", "score": 0.7}]
