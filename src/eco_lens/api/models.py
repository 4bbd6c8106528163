"""Request models for the HTTP API."""

from pydantic import BaseModel

from eco_lens.domain.report import AnalysisRequest


class AnalyzeRequest(BaseModel):
    """Body of an analysis request; ``image`` is a URL or data URL."""

    text: str = ""
    image: str | None = None
    image_name: str = ""
    location: str = ""

    def to_domain(self) -> AnalysisRequest:
        return AnalysisRequest(
            text=self.text,
            image=self.image or None,
            image_name=self.image_name,
            location=self.location,
        )
