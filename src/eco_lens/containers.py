"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from eco_lens.adapters.hf_inference_client import (
    HostedImageClassifier,
    HostedTextClassifier,
    HttpxInferenceClient,
)
from eco_lens.adapters.transformers_classifiers import (
    PipelineFactory,
    TransformersImageClassifier,
    TransformersTextClassifier,
    build_pipeline_loader,
)
from eco_lens.config import Settings, parse_backend
from eco_lens.services.analyzer import SustainabilityAnalyzer
from eco_lens.services.classifiers import (
    ClassificationService,
    ImageClassifier,
    TextClassifier,
)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    classification_service: ClassificationService
    analyzer: SustainabilityAnalyzer
    close_resources: Callable[[], Awaitable[None]]


def build_container(
    settings: Settings | None = None,
    pipeline_factory: PipelineFactory | None = None,
) -> AppContainer:
    """Create the default dependency container.

    The local backend shares one lazily loaded pair of pipelines between the
    text and image classifiers; nothing is loaded until the first request.
    """
    resolved_settings = settings or Settings()
    backend = parse_backend(resolved_settings.inference_backend)
    text_classifier: TextClassifier
    image_classifier: ImageClassifier
    inference_client: HttpxInferenceClient | None = None

    if backend == "hosted":
        inference_client = HttpxInferenceClient.create(
            base_url=resolved_settings.hf_inference_url,
            api_token=resolved_settings.hf_api_token,
            timeout=resolved_settings.inference_timeout_seconds,
        )
        text_classifier = HostedTextClassifier(
            client=inference_client, model=resolved_settings.text_model
        )
        image_classifier = HostedImageClassifier(
            client=inference_client, model=resolved_settings.image_model
        )
    else:
        pipelines = build_pipeline_loader(
            text_model=resolved_settings.text_model,
            image_model=resolved_settings.image_model,
            factory=pipeline_factory,
        )
        text_classifier = TransformersTextClassifier(pipelines)
        image_classifier = TransformersImageClassifier(pipelines)

    classification_service = ClassificationService(
        text_classifier=text_classifier,
        image_classifier=image_classifier,
        top_k=resolved_settings.image_top_k,
        debug=resolved_settings.debug,
    )
    analyzer = SustainabilityAnalyzer(
        classification_service=classification_service,
        debug=resolved_settings.debug,
    )

    async def close_resources() -> None:
        if inference_client is not None:
            await inference_client.close()

    return AppContainer(
        settings=resolved_settings,
        classification_service=classification_service,
        analyzer=analyzer,
        close_resources=close_resources,
    )
