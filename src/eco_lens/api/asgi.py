"""ASGI entrypoint for the eco_lens API."""

from eco_lens.api.app import create_app
from eco_lens.containers import build_container

app = create_app(build_container())
