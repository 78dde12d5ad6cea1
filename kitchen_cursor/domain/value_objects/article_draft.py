# -*- coding: utf-8 -*-
"""
Value Objects: article drafts with provenance.

The generation pipeline returns either a GeneratedArticle (the LLM answered)
or a FallbackArticle (templated from the topic). Both persist the same way,
the variant only records where the text came from.
"""

import html
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

# Longest topic the generation pipeline accepts
MAX_TOPIC_LENGTH = 200


class ArticleSource(str, Enum):
    """Where article text came from."""
    GENERATED = "generated"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class GeneratedArticle:
    """Article written by the text generator."""
    title: str
    excerpt: str
    content: str
    model: Optional[str] = None

    source = ArticleSource.GENERATED


@dataclass(frozen=True)
class FallbackArticle:
    """Templated article used when generation fails."""
    title: str
    excerpt: str
    content: str
    reason: str = ""

    source = ArticleSource.FALLBACK

    @classmethod
    def for_topic(cls, topic: str, reason: str = "") -> 'FallbackArticle':
        """Build a minimal but usable article from the topic alone."""
        safe = html.escape(topic)
        return cls(
            title=f"Ultimate Guide to {topic}",
            excerpt=f"Discover everything you need to know about {topic} in this comprehensive guide.",
            content=(
                f"<h1>Ultimate Guide to {safe}</h1>\n"
                f"<p>This is a comprehensive guide about {safe}. "
                f"We'll cover everything you need to know.</p>\n"
                f"<h2>What is {safe}?</h2>\n"
                f"<p>{safe} is an important topic that many people are interested in learning about.</p>\n"
                f"<h2>Key Features</h2>\n"
                f"<ul>\n<li>Important feature 1</li>\n<li>Important feature 2</li>\n"
                f"<li>Important feature 3</li>\n</ul>\n"
                f"<h2>Conclusion</h2>\n"
                f"<p>In conclusion, {safe} is a fascinating subject with many applications and benefits.</p>"
            ),
            reason=reason,
        )


ArticleDraft = Union[GeneratedArticle, FallbackArticle]
