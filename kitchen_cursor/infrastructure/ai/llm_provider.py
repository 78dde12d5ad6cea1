"""
LLM providers.

Two transports:
- OpenAI-compatible chat completions (OpenAI, OpenRouter) over requests
- Ollama for local models through the ollama client

All providers are synchronous; async callers run them in a worker thread.
"""

import json
import logging
import re
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any, Optional, Type, TypeVar, Union

import httpx
import ollama
import requests
from pydantic import BaseModel, ValidationError

from kitchen_cursor.infrastructure.config.settings import Settings
from kitchen_cursor.shared.exceptions.infrastructure_exceptions import ExternalServiceError

logger = logging.getLogger(__name__)
T = TypeVar('T', bound=BaseModel)


# =============================================================================
# Enums and configuration
# =============================================================================

class LLMProviderType(str, Enum):
    """Supported LLM providers."""
    OPENAI = "openai"
    OPENROUTER = "openrouter"
    OLLAMA = "ollama"


@dataclass
class LLMConfig:
    """LLM provider configuration."""
    provider: LLMProviderType
    model: str
    temperature: float = 0.7
    max_tokens: int = 4096
    api_key: Optional[str] = None
    base_url: Optional[str] = None
    timeout: int = 180

    OPENAI_DEFAULT_URL = "https://api.openai.com/v1"
    OPENROUTER_DEFAULT_URL = "https://openrouter.ai/api/v1"
    OLLAMA_DEFAULT_URL = "http://ollama:11434"

    def __post_init__(self):
        if isinstance(self.provider, str):
            self.provider = LLMProviderType(self.provider.lower())

    def get_base_url(self) -> str:
        if self.base_url:
            return self.base_url

        defaults = {
            LLMProviderType.OPENAI: self.OPENAI_DEFAULT_URL,
            LLMProviderType.OPENROUTER: self.OPENROUTER_DEFAULT_URL,
            LLMProviderType.OLLAMA: self.OLLAMA_DEFAULT_URL,
        }
        return defaults.get(self.provider, "")

    @classmethod
    def from_settings(cls, settings: Settings) -> "LLMConfig":
        provider = LLMProviderType(settings.llm_provider.lower())
        return cls(
            provider=provider,
            model=settings.llm_model,
            temperature=settings.llm_temperature,
            api_key=settings.get_llm_api_key(),
            base_url=settings.ollama_base_url if provider == LLMProviderType.OLLAMA else None,
            timeout=settings.llm_timeout,
        )


# =============================================================================
# Base provider
# =============================================================================

class LLMProvider(ABC):
    """Base class of LLM providers."""

    def __init__(self, config: LLMConfig):
        self.config = config
        self.provider_name = config.provider.value
        self.model = config.model
        self.api_key = config.api_key
        self.base_url = config.get_base_url()

        self._request_count = 0
        self._error_count = 0

        logger.info(f"[LLM] Provider {self.provider_name} initialized (model: {self.model})")

    @abstractmethod
    def generate(
            self,
            prompt: str,
            system_prompt: Optional[str] = None,
            temperature: Optional[float] = None,
            max_tokens: Optional[int] = None,
            **kwargs
    ) -> str:
        """
        Generate raw text.

        Raises:
            ExternalServiceError: On transport or provider errors
        """
        pass

    def generate_structured(
            self,
            prompt: str,
            output_schema: Type[T],
            system_prompt: Optional[str] = None,
            max_retries: int = 2,
            **kwargs
    ) -> T:
        """
        Generate a response parsed into a pydantic schema.

        The JSON object is extracted from the reply (bare, fenced or embedded
        in prose) and validated against ``output_schema``.

        Raises:
            ExternalServiceError: When no attempt produced a valid object
        """
        last_error: Optional[Exception] = None
        example_json = self._build_example_json(output_schema)

        json_prompt = f"""{prompt}

Respond with a single valid JSON object only, with no text before or after it.
Use exactly this structure:
{example_json}"""

        for attempt in range(max_retries):
            try:
                response = self.generate(json_prompt, system_prompt, **kwargs)
                json_data = self._extract_json(response)
                if json_data is not None:
                    return output_schema(**json_data)
                last_error = ValueError("No valid JSON object in the response")
            except (ExternalServiceError, ValidationError, TypeError) as e:
                last_error = e
                logger.warning(f"[LLM] Structured attempt {attempt + 1} failed: {e}")

            if attempt < max_retries - 1:
                time.sleep(1)

        raise ExternalServiceError(
            self.provider_name, f"Could not get a structured response: {last_error}"
        )

    def _build_example_json(self, schema: Type[BaseModel]) -> str:
        """JSON example built from the schema field names and descriptions."""
        example = {}
        for field_name, field_info in schema.model_fields.items():
            annotation = field_info.annotation
            if annotation is float or annotation is int:
                example[field_name] = 4.5
            elif field_info.description:
                example[field_name] = f"<{field_info.description}>"
            else:
                example[field_name] = f"<{field_name}>"
        return json.dumps(example, ensure_ascii=False, indent=2)

    def _extract_json(self, text: str) -> Optional[Dict[str, Any]]:
        """Pull a JSON object out of a text reply."""
        if not text:
            return None

        text = text.strip()

        try:
            data = json.loads(text)
            if isinstance(data, dict):
                return data
        except json.JSONDecodeError:
            pass

        code_blocks = re.findall(r'```(?:json)?\s*([\s\S]*?)\s*```', text, re.IGNORECASE)
        for block in code_blocks:
            try:
                data = json.loads(block.strip())
                if isinstance(data, dict):
                    return data
            except json.JSONDecodeError:
                continue

        start = text.find('{')
        if start != -1:
            brace_count = 0
            in_string = False
            escaped = False
            for i in range(start, len(text)):
                char = text[i]
                if in_string:
                    if escaped:
                        escaped = False
                    elif char == '\\':
                        escaped = True
                    elif char == '"':
                        in_string = False
                    continue
                if char == '"':
                    in_string = True
                elif char == '{':
                    brace_count += 1
                elif char == '}':
                    brace_count -= 1
                    if brace_count == 0:
                        try:
                            return json.loads(text[start:i + 1])
                        except json.JSONDecodeError:
                            break

        return None

    def get_metrics(self) -> Dict[str, Any]:
        return {
            "provider": self.provider_name,
            "model": self.model,
            "requests": self._request_count,
            "errors": self._error_count,
        }


# =============================================================================
# OpenAI-compatible provider (OpenAI, OpenRouter)
# =============================================================================

class OpenAICompatibleProvider(LLMProvider):
    """Chat completions over the OpenAI wire format."""

    def __init__(self, config: LLMConfig):
        super().__init__(config)
        self.api_base = self.base_url.rstrip('/')
        self.headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json"
        }

    def generate(
            self,
            prompt: str,
            system_prompt: Optional[str] = None,
            temperature: Optional[float] = None,
            max_tokens: Optional[int] = None,
            **kwargs
    ) -> str:
        self._request_count += 1

        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        data = {
            "model": self.model,
            "messages": messages,
            "temperature": temperature if temperature is not None else self.config.temperature,
            "max_tokens": max_tokens or self.config.max_tokens,
        }
        if kwargs.get("json_mode"):
            data["response_format"] = {"type": "json_object"}

        try:
            response = requests.post(
                f"{self.api_base}/chat/completions",
                headers=self.headers,
                json=data,
                timeout=self.config.timeout
            )
        except requests.RequestException as e:
            self._error_count += 1
            logger.error(f"[LLM] {self.provider_name} request failed: {e}")
            raise ExternalServiceError(self.provider_name, str(e)) from e

        if response.status_code != 200:
            self._error_count += 1
            error_msg = f"HTTP {response.status_code}: {response.text[:300]}"
            logger.error(f"[LLM] {self.provider_name} error: {error_msg}")
            raise ExternalServiceError(self.provider_name, error_msg)

        try:
            return response.json()["choices"][0]["message"]["content"] or ""
        except (ValueError, KeyError, IndexError) as e:
            self._error_count += 1
            raise ExternalServiceError(self.provider_name, f"Malformed response: {e}") from e


# =============================================================================
# Ollama provider
# =============================================================================

class OllamaProvider(LLMProvider):
    """Local models through the Ollama server."""

    def __init__(self, config: LLMConfig):
        super().__init__(config)
        self.client = ollama.Client(host=self.base_url, timeout=config.timeout)

    def generate(
            self,
            prompt: str,
            system_prompt: Optional[str] = None,
            temperature: Optional[float] = None,
            max_tokens: Optional[int] = None,
            **kwargs
    ) -> str:
        self._request_count += 1

        try:
            response = self.client.generate(
                model=self.model,
                prompt=prompt,
                system=system_prompt or "",
                format="json" if kwargs.get("json_mode") else "",
                options={
                    "temperature": temperature if temperature is not None else self.config.temperature,
                    "num_predict": max_tokens or self.config.max_tokens,
                },
            )
        except (ollama.ResponseError, httpx.HTTPError, ConnectionError) as e:
            self._error_count += 1
            logger.error(f"[LLM] Ollama generation failed: {e}")
            raise ExternalServiceError(self.provider_name, str(e)) from e

        return response['response'].strip()


# =============================================================================
# Factory
# =============================================================================

class LLMProviderFactory:
    """Creates LLM providers."""

    _providers = {
        "openai": OpenAICompatibleProvider,
        "openrouter": OpenAICompatibleProvider,
        "ollama": OllamaProvider,
    }

    @classmethod
    def create(cls, config: Union[LLMConfig, Settings]) -> LLMProvider:
        if isinstance(config, Settings):
            config = LLMConfig.from_settings(config)

        provider_name = config.provider.value
        if provider_name not in cls._providers:
            raise ValueError(f"Unknown provider: {provider_name}")

        return cls._providers[provider_name](config)
