"""
Content generation agents.
"""

from kitchen_cursor.application.ai_services.agents.base_agent import BaseAgent, AgentMetrics
from kitchen_cursor.application.ai_services.agents.article_writer_agent import (
    ArticleWriterAgent,
    ArticleResult,
)
from kitchen_cursor.application.ai_services.agents.product_review_agent import (
    ProductReviewAgent,
    ReviewDraft,
)

__all__ = [
    'BaseAgent',
    'AgentMetrics',
    'ArticleWriterAgent',
    'ArticleResult',
    'ProductReviewAgent',
    'ReviewDraft',
]
