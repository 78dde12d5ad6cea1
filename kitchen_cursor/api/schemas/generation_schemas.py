"""
Pydantic schemas: post generation.
"""

from typing import Dict, List
from pydantic import BaseModel

from kitchen_cursor.api.schemas.post_schemas import PostResponse
from kitchen_cursor.application.generation.orchestrator import GenerationReport


class GeneratePostRequest(BaseModel):
    """Emptiness is checked by the pipeline, not here."""
    topic: str


class GenerationResponse(BaseModel):
    """Generated post plus a summary of the run."""

    post: PostResponse
    article_source: str
    hero_fallback: bool
    products_found: int
    failed_products: List[str]
    step_durations: Dict[str, float]

    @classmethod
    def from_report(cls, report: GenerationReport) -> "GenerationResponse":
        return cls(
            post=PostResponse.from_entity(report.post),
            article_source=report.article_source.value,
            hero_fallback=report.hero_fallback,
            products_found=report.products_found,
            failed_products=report.failed_products,
            step_durations={k: round(v, 3) for k, v in report.step_durations.items()},
        )
