# -*- coding: utf-8 -*-
# =============================================================================
# Path: kitchen_cursor/application/ai_services/agents/product_review_agent.py
# =============================================================================
"""
Product review agent.

Writes a short review with pros, cons and a verdict, plus a star rating.
The rating is returned as the model gave it; callers normalize it.
"""

import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from kitchen_cursor.application.ai_services.agents.base_agent import BaseAgent

logger = logging.getLogger(__name__)


class ReviewDraft(BaseModel):
    """Review returned by the model."""

    model_config = ConfigDict(populate_by_name=True)

    rating: float = Field(description="Rating from 1 to 5 stars")
    review_content: str = Field(
        alias="reviewContent",
        min_length=1,
        description="Review text with pros, cons and verdict",
    )


class ProductReviewAgent(BaseAgent):
    """Writes product reviews."""

    agent_name = "product_review"

    SYSTEM_PROMPT = (
        "You are an expert product reviewer who provides honest, detailed reviews. "
        "Always respond with valid JSON."
    )

    REVIEW_PROMPT = """You are an expert content writer specializing in SEO-optimized product roundups and reviews.
Write a detailed, engaging, and helpful review for the product "{title}"{details} that provides real value to the reader.

Requirements:
- Write a 200-300 word review with pros, cons, and a verdict
- Use a friendly but professional tone
- Include specific details about features, quality, and value
- Be honest and balanced in your assessment
- Write from the perspective of someone who has used the product
- Make it helpful for potential buyers
- Provide a rating from 1-5 stars based on overall value and performance"""

    def process(self, title: str, description: Optional[str] = None) -> ReviewDraft:
        details = f" ({description})" if description else ""
        prompt = self.REVIEW_PROMPT.format(title=title, details=details)
        return self.generate_structured(
            prompt=prompt,
            output_schema=ReviewDraft,
            system_prompt=self.SYSTEM_PROMPT,
            json_mode=True,
            max_tokens=1000,
        )

    def review(self, title: str, description: Optional[str] = None) -> ReviewDraft:
        """
        Review one product.

        Raises:
            ExternalServiceError: If the model gave no usable review
        """
        draft = self.process(title, description)
        logger.info(f"[ProductReview] '{title}': rating={draft.rating}")
        return draft
