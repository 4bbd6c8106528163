"""Hugging Face Inference API client."""

import base64
from collections.abc import Sequence
from dataclasses import dataclass

import httpx

from eco_lens.services.classifiers import ImageClassifier, TextClassifier


@dataclass
class HttpxInferenceClient:
    """HTTPX-backed client for hosted zero-shot and image classification."""

    base_url: str
    api_token: str | None
    http_client: httpx.AsyncClient
    timeout: float = 30

    @classmethod
    def create(
        cls, base_url: str, api_token: str | None, timeout: float = 30
    ) -> "HttpxInferenceClient":
        """Create an inference client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            api_token=api_token,
            http_client=httpx.AsyncClient(),
            timeout=timeout,
        )

    def _headers(self) -> dict[str, str]:
        if not self.api_token:
            return {}
        return {"Authorization": f"Bearer {self.api_token}"}

    async def zero_shot(
        self, model: str, text: str, labels: Sequence[str]
    ) -> object:
        """Score candidate labels against text independently."""
        response = await self.http_client.post(
            f"{self.base_url}/{model}",
            headers=self._headers(),
            json={
                "inputs": text,
                "parameters": {"candidate_labels": list(labels), "multi_label": True},
            },
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response.json()

    async def classify_image(self, model: str, image: object, top_k: int) -> object:
        """Classify an image given as bytes, a file object, or a (data) URL."""
        url = f"{self.base_url}/{model}"
        if isinstance(image, str) and not image.startswith("data:"):
            response = await self.http_client.post(
                url,
                headers=self._headers(),
                json={"inputs": image, "parameters": {"top_k": top_k}},
                timeout=self.timeout,
            )
        else:
            response = await self.http_client.post(
                url,
                headers={**self._headers(), "Content-Type": "application/octet-stream"},
                content=_image_bytes(image),
                timeout=self.timeout,
            )
        response.raise_for_status()
        payload = response.json()
        if isinstance(payload, list):
            return payload[:top_k]
        return payload

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


@dataclass
class HostedTextClassifier(TextClassifier):
    """Text classifier delegating to the Inference API."""

    client: HttpxInferenceClient
    model: str

    async def classify(self, text: str, labels: Sequence[str]) -> object:
        return await self.client.zero_shot(self.model, text, labels)


@dataclass
class HostedImageClassifier(ImageClassifier):
    """Image classifier delegating to the Inference API."""

    client: HttpxInferenceClient
    model: str

    async def classify(self, image: object, top_k: int) -> object:
        return await self.client.classify_image(self.model, image, top_k)


def _image_bytes(image: object) -> bytes:
    """Turn a supported image handle into raw bytes."""
    if isinstance(image, bytes | bytearray | memoryview):
        return bytes(image)
    if isinstance(image, str):
        _, _, encoded = image.partition(",")
        return base64.b64decode(encoded)
    read = getattr(image, "read", None)
    if callable(read):
        data = read()
        if isinstance(data, bytes):
            return data
    raise TypeError(f"Unsupported image handle: {type(image).__name__}")
