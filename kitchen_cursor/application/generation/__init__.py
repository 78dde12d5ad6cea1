"""
Post generation pipeline.
"""

from kitchen_cursor.application.generation.orchestrator import GenerationOrchestrator, GenerationReport
from kitchen_cursor.application.generation.review_synthesizer import ProductReviewSynthesizer

__all__ = ['GenerationOrchestrator', 'GenerationReport', 'ProductReviewSynthesizer']
