# -*- coding: utf-8 -*-
# =============================================================================
# Path: kitchen_cursor/application/ai_services/agents/article_writer_agent.py
# =============================================================================
"""
Article writer agent.

Writes an SEO-oriented HTML article for a topic, together with a short
title and meta description.
"""

import logging
import re

from pydantic import BaseModel, Field, field_validator

from kitchen_cursor.application.ai_services.agents.base_agent import BaseAgent
from kitchen_cursor.domain.value_objects.article_draft import GeneratedArticle
from kitchen_cursor.shared.exceptions.infrastructure_exceptions import ExternalServiceError

logger = logging.getLogger(__name__)

_IMG_RE = re.compile(r'<img\b[^>]*>', re.IGNORECASE)


class ArticleResult(BaseModel):
    """Article returned by the model."""

    title: str = Field(description="SEO title, max 60 characters")
    excerpt: str = Field(description="Meta description, max 160 characters")
    content: str = Field(description="Full article in HTML")

    @field_validator('title', 'content')
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Field cannot be empty")
        return v

    @field_validator('excerpt')
    @classmethod
    def strip_excerpt(cls, v: str) -> str:
        return v.strip()


class ArticleWriterAgent(BaseAgent):
    """Writes blog articles."""

    agent_name = "article_writer"

    SYSTEM_PROMPT = "You are a skilled SEO content writer. Always respond with valid JSON."

    ARTICLE_PROMPT = """You are an expert content writer specializing in SEO-optimized blog posts.
Write a detailed, engaging, and helpful article about "{topic}" that provides real value to the reader.

Requirements:
- Minimum 1,200 words
- Use a friendly but professional tone
- Break the content into clear sections with H2/H3 headings
- Include a short introduction and a conclusion
- Add bullet points and numbered lists where appropriate
- Optimize for search engines by naturally including relevant keywords
- Make it informative, actionable, and easy to read
- Avoid fluff and filler sentences
- Do not include any images, image tags, or image URLs in the content

Format the article in HTML using <h1>, <h2>, <h3>, <p>, <ul>, <li>, <strong> and <em>.
Use clean, semantic HTML without CSS classes or styling attributes.

Also provide:
1. An SEO-optimized title (max 60 characters)
2. A compelling meta description (max 160 characters)"""

    def process(self, topic: str) -> ArticleResult:
        prompt = self.ARTICLE_PROMPT.format(topic=topic)
        return self.generate_structured(
            prompt=prompt,
            output_schema=ArticleResult,
            system_prompt=self.SYSTEM_PROMPT,
            json_mode=True,
            max_tokens=4000,
        )

    def write(self, topic: str) -> GeneratedArticle:
        """
        Write an article for a topic.

        Raises:
            ExternalServiceError: If the model gave no usable article
        """
        result = self.process(topic)
        content = _IMG_RE.sub('', result.content)
        if not content.strip():
            raise ExternalServiceError(self.agent_name, "Article content is empty")

        logger.info(f"[ArticleWriter] '{result.title}': {len(content)} chars")
        return GeneratedArticle(
            title=result.title,
            excerpt=result.excerpt,
            content=content,
            model=self.model,
        )
