"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import Body, FastAPI, HTTPException, Request, status

from eco_lens.api.models import AnalyzeRequest
from eco_lens.app_logging import configure_logging
from eco_lens.containers import AppContainer
from eco_lens.services.analyzer import explain
from eco_lens.services.classifiers import ClassificationError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(debug=container.settings.debug)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/analyze")
    async def analyze(body: AnalyzeRequest, request: Request) -> dict[str, object]:
        """Classify the input and return the sustainability report."""
        state_container: AppContainer = request.app.state.container
        try:
            report = await state_container.analyzer.analyze(body.to_domain())
        except ClassificationError as exc:
            logger.exception("Analysis failed")
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail="Classification failed",
            ) from exc
        return {"report": report.to_dict(), "explanation": explain(report)}

    @app.post("/explain")
    async def explain_report(
        payload: Any = Body(default=None),  # noqa: B008
    ) -> dict[str, str]:
        """Render the one-line summary for a (possibly partial) report."""
        return {"explanation": explain(payload)}

    return app
