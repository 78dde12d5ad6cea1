# -*- coding: utf-8 -*-
# =============================================================================
# Path: kitchen_cursor/application/ai_services/agents/base_agent.py
# =============================================================================
"""
Base class for content generation agents.

Wraps an LLM provider with retries and call metrics. Agents are synchronous;
the generation pipeline runs them in worker threads.
"""

from abc import ABC, abstractmethod
from typing import Optional, Type, TypeVar, Any
import logging
import time
from dataclasses import dataclass

from pydantic import BaseModel

from kitchen_cursor.infrastructure.ai.llm_provider import LLMProvider, LLMProviderFactory
from kitchen_cursor.infrastructure.config.settings import get_settings
from kitchen_cursor.shared.exceptions.infrastructure_exceptions import ExternalServiceError

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=BaseModel)

__all__ = ['BaseAgent', 'AgentMetrics']


@dataclass
class AgentMetrics:
    """Agent call metrics."""
    total_calls: int = 0
    successful_calls: int = 0
    failed_calls: int = 0
    total_latency_ms: float = 0.0

    @property
    def success_rate(self) -> float:
        return self.successful_calls / self.total_calls if self.total_calls else 0.0

    @property
    def avg_latency_ms(self) -> float:
        return self.total_latency_ms / self.successful_calls if self.successful_calls else 0.0


class BaseAgent(ABC):
    """
    Base class for agents.

    Without an explicit provider one is built from application settings.
    """

    agent_name: str = "base"

    def __init__(
            self,
            llm_provider: Optional[LLMProvider] = None,
            max_retries: int = 1,
            retry_delay: float = 2.0
    ):
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.metrics = AgentMetrics()
        self._llm = llm_provider or LLMProviderFactory.create(get_settings())

        logger.info(
            f"[INIT] {self.__class__.__name__}: "
            f"provider={self._llm.config.provider.value}, model={self.model}"
        )

    @property
    def llm(self) -> LLMProvider:
        return self._llm

    @property
    def model(self) -> str:
        return self._llm.config.model

    def generate_structured(
            self,
            prompt: str,
            output_schema: Type[T],
            system_prompt: Optional[str] = None,
            **kwargs
    ) -> T:
        """
        Structured generation with retries.

        Raises:
            ExternalServiceError: When every attempt failed
        """
        self.metrics.total_calls += 1
        start_time = time.time()

        last_error: Optional[Exception] = None
        for attempt in range(self.max_retries + 1):
            try:
                result = self._llm.generate_structured(
                    prompt=prompt,
                    output_schema=output_schema,
                    system_prompt=system_prompt,
                    **kwargs
                )

                latency = (time.time() - start_time) * 1000
                self.metrics.successful_calls += 1
                self.metrics.total_latency_ms += latency
                return result

            except ExternalServiceError as e:
                last_error = e
                logger.warning(f"[{self.agent_name}] Attempt {attempt + 1} failed: {e}")

                if attempt < self.max_retries:
                    time.sleep(self.retry_delay * (attempt + 1))

        self.metrics.failed_calls += 1
        raise ExternalServiceError(self.agent_name, f"Generation failed: {last_error}")

    def get_metrics(self) -> dict:
        """Agent metrics."""
        return {
            "agent": self.agent_name,
            "model": self.model,
            "total_calls": self.metrics.total_calls,
            "successful_calls": self.metrics.successful_calls,
            "failed_calls": self.metrics.failed_calls,
            "success_rate": f"{self.metrics.success_rate:.2%}",
            "avg_latency_ms": f"{self.metrics.avg_latency_ms:.0f}",
        }

    @abstractmethod
    def process(self, *args, **kwargs) -> Any:
        """Main entry point, implemented by subclasses."""
        pass
