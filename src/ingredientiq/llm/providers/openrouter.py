import logging
from typing import Any

import httpx
from openai import APIConnectionError, APIError, APIStatusError, AsyncOpenAI

from ...config.models import DEFAULT_BASE_URL, DEFAULT_MODEL, DEFAULT_TIMEOUT
from ...errors import (
    ApiConnectionError,
    EmptyResponseError,
    MalformedResponseError,
    RequestFailedError,
)
from ..base import ChatClient
from ..models import ChatMessage, LLMResponse
from ..transport import AttributionTransport

logger = logging.getLogger(__name__)


class OpenRouterClient(ChatClient):
    """OpenRouter chat client using the OpenAI-compatible API.

    Hidden design decisions:
    - OpenAI SDK client initialization against a custom base URL
    - Attribution headers via a decorated httpx transport
    - Message format conversion
    - Mapping SDK exceptions onto ApiError subclasses

    A failed call is never retried.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        model: str = DEFAULT_MODEL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
        **client_kwargs: Any
    ):
        """Initialize OpenRouter client.

        Args:
            api_key: Bearer token for the API
            base_url: API base URL; requests go to {base_url}/chat/completions
            model: Default model to use
            timeout: Request deadline in seconds
            transport: Inner httpx transport (default: httpx network transport)
            **client_kwargs: Additional kwargs for AsyncOpenAI client
        """
        self._model = model
        self._http_client = httpx.AsyncClient(
            transport=AttributionTransport(transport),
            timeout=timeout,
        )
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
            http_client=self._http_client,
            **client_kwargs
        )

    @property
    def model(self) -> str:
        """Get the default model name."""
        return self._model

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        """Generate a chat completion through OpenRouter.

        Args:
            messages: Conversation history
            model: Model to use (overrides default)
            **kwargs: Additional request parameters

        Returns:
            LLMResponse with the first choice's content
        """
        model_to_use = model or self._model
        logger.debug("Requesting completion from %s with %d messages", model_to_use, len(messages))

        try:
            completion = await self._client.chat.completions.create(
                model=model_to_use,
                messages=[msg.to_api() for msg in messages],
                **kwargs
            )
        except APIStatusError as e:
            raise RequestFailedError(e.status_code, e.response.text) from e
        except APIConnectionError as e:
            raise ApiConnectionError(str(e)) from e
        except APIError as e:
            raise MalformedResponseError(str(e)) from e
        except ValueError as e:
            # body was not JSON
            raise MalformedResponseError(str(e)) from e

        # OpenRouter reports some upstream failures as a 200 without choices
        choices = getattr(completion, "choices", None)
        if not choices:
            raise EmptyResponseError()
        message = getattr(choices[0], "message", None)
        if message is None:
            raise EmptyResponseError()

        usage = None
        if getattr(completion, "usage", None):
            usage = {
                "prompt_tokens": completion.usage.prompt_tokens,
                "completion_tokens": completion.usage.completion_tokens,
                "total_tokens": completion.usage.total_tokens
            }

        return LLMResponse(
            content=message.content or "",
            model=getattr(completion, "model", None) or model_to_use,
            usage=usage
        )

    async def close(self) -> None:
        """Close the underlying SDK and HTTP clients."""
        await self._client.close()
