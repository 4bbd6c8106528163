"""Tests for the hosted inference adapter."""

import asyncio
import base64
import io
import json

import httpx
import pytest

from eco_lens.adapters.hf_inference_client import (
    HostedImageClassifier,
    HostedTextClassifier,
    HttpxInferenceClient,
)


def _client(handler) -> HttpxInferenceClient:  # type: ignore[no-untyped-def]
    transport = httpx.MockTransport(handler)
    return HttpxInferenceClient(
        base_url="https://inference.test/models",
        api_token="hf-token",
        http_client=httpx.AsyncClient(transport=transport),
    )


def test_zero_shot_posts_candidate_labels() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200, json={"sequence": "oat milk", "labels": ["dairy"], "scores": [0.9]}
        )

    client = _client(handler)
    classifier = HostedTextClassifier(client=client, model="org/mnli")

    result = asyncio.run(classifier.classify("oat milk", ["dairy", "drink"]))

    assert result == {"sequence": "oat milk", "labels": ["dairy"], "scores": [0.9]}
    request = seen[0]
    assert request.url.path == "/models/org/mnli"
    assert request.headers["Authorization"] == "Bearer hf-token"
    payload = json.loads(request.content.decode())
    assert payload == {
        "inputs": "oat milk",
        "parameters": {"candidate_labels": ["dairy", "drink"], "multi_label": True},
    }


def test_image_bytes_are_posted_raw_and_trimmed_to_top_k() -> None:
    seen: list[bytes] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.content)
        return httpx.Response(
            200,
            json=[
                {"label": "banana", "score": 0.9},
                {"label": "lemon", "score": 0.05},
                {"label": "corn", "score": 0.01},
            ],
        )

    classifier = HostedImageClassifier(client=_client(handler), model="org/vit")

    result = asyncio.run(classifier.classify(b"\x89PNG-data", 2))

    assert seen == [b"\x89PNG-data"]
    assert result == [
        {"label": "banana", "score": 0.9},
        {"label": "lemon", "score": 0.05},
    ]


def test_image_data_url_and_file_object_are_decoded() -> None:
    seen: list[bytes] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.content)
        return httpx.Response(200, json=[])

    client = _client(handler)
    data_url = "data:image/jpeg;base64," + base64.b64encode(b"jpeg-bytes").decode()

    asyncio.run(client.classify_image("org/vit", data_url, 5))
    asyncio.run(client.classify_image("org/vit", io.BytesIO(b"file-bytes"), 5))

    assert seen == [b"jpeg-bytes", b"file-bytes"]


def test_image_url_is_sent_as_json() -> None:
    payloads: list[dict[str, object]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        payloads.append(json.loads(request.content.decode()))
        return httpx.Response(200, json=[{"label": "mug", "score": 0.4}])

    client = _client(handler)

    asyncio.run(client.classify_image("org/vit", "https://img.test/mug.jpg", 5))

    assert payloads == [
        {"inputs": "https://img.test/mug.jpg", "parameters": {"top_k": 5}}
    ]


def test_unsupported_image_handle_raises() -> None:
    client = _client(lambda request: httpx.Response(200, json=[]))

    with pytest.raises(TypeError):
        asyncio.run(client.classify_image("org/vit", 42, 5))


def test_http_errors_propagate() -> None:
    client = _client(lambda request: httpx.Response(503, json={"error": "loading"}))

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(client.zero_shot("org/mnli", "soap", ["cosmetic"]))


def test_create_without_token_sends_no_auth_header() -> None:
    client = HttpxInferenceClient.create(
        base_url="https://inference.test/models/", api_token=None
    )

    assert client.base_url == "https://inference.test/models"
    assert client._headers() == {}
    asyncio.run(client.close())
