"""Gateway: OpenAI-compatible chat API — implements ChatApi port.

Works with any OpenAI-compatible gateway: OpenAI, OpenRouter, Groq, vLLM, LM Studio, etc.
SDK exceptions are translated into the domain error types here and nowhere else.
"""

from __future__ import annotations

import logging

import httpx
import openai

from persona_chat.l1_entities.chat_message import ChatMessage
from persona_chat.l1_entities.errors import ApiError, HttpError, NetworkError, ValidationError
from persona_chat.l1_entities.settings import ConnectionSettings
from persona_chat.l2_use_cases.utils.prompt_builder import build_chat_messages

log = logging.getLogger('pchat.api')


def normalize_base_url(url: str) -> str:
    """Return *url* with exactly one trailing slash."""
    return url.strip().rstrip('/') + '/'


def _error_message(body: object) -> str | None:
    """Pull ``error.message`` (or a top-level ``message``) out of an error body."""
    if not isinstance(body, dict):
        return None
    inner = body.get('error', body)
    if not isinstance(inner, dict):
        return None
    message = inner.get('message')
    if isinstance(message, str) and message:
        return message
    return None


class OpenAIChatApi:
    """Wraps openai.AsyncOpenAI to implement the ChatApi protocol. One attempt per call."""

    def __init__(self, http_client: httpx.AsyncClient | None = None) -> None:
        self._http_client = http_client

    def _client(self, settings: ConnectionSettings) -> openai.AsyncOpenAI:
        if not settings.is_complete:
            raise ValidationError('API base URL and API key are required.')
        return openai.AsyncOpenAI(
            api_key=settings.api_key,
            base_url=normalize_base_url(settings.api_url),
            max_retries=0,
            http_client=self._http_client,
        )

    async def list_models(self, settings: ConnectionSettings) -> list[str]:
        client = self._client(settings)
        try:
            page = await client.models.list()
        except openai.APIStatusError as e:
            log.warning('Model listing returned HTTP %d', e.status_code)
            raise HttpError(e.status_code) from e
        except openai.APIError as e:
            raise _translate(e) from e
        data = getattr(page, 'data', None)
        if not isinstance(data, list):
            raise ApiError('The API returned no model list.')
        models = []
        for entry in data:
            model_id = getattr(entry, 'id', None)
            if not isinstance(model_id, str):
                raise ApiError('The API returned a model entry without an id.')
            models.append(model_id)
        log.info('Fetched %d models from %s', len(models), settings.api_url)
        return models

    async def chat_completion(
        self,
        settings: ConnectionSettings,
        model: str,
        system_prompt: str,
        history: list[ChatMessage],
        new_message: str,
    ) -> str:
        client = self._client(settings)
        messages = build_chat_messages(system_prompt, history, new_message)
        log.debug('Chat request: model=%s, %d messages', model, len(messages))
        try:
            resp = await client.chat.completions.create(
                model=model,
                messages=messages,  # ty: ignore[invalid-argument-type] -- dict satisfies ChatCompletionMessageParam at runtime
                stream=False,
            )
        except openai.APIError as e:
            raise _translate(e) from e
        if not resp.choices:
            raise ApiError('The API returned no completion choices.')
        message = resp.choices[0].message
        if message is None:
            raise ApiError('The API returned a completion choice without a message.')
        return message.content or ''


def _translate(exc: openai.APIError) -> Exception:
    if isinstance(exc, openai.APIStatusError):
        message = _error_message(exc.body)
        log.warning('API returned HTTP %d: %s', exc.status_code, message or '(no message)')
        if message:
            return ApiError(message, status=exc.status_code)
        return HttpError(exc.status_code)
    if isinstance(exc, openai.APIConnectionError):
        log.warning('Network failure: %s', exc)
        return NetworkError(f'Cannot reach the API: {exc}')
    return ApiError(str(exc))
