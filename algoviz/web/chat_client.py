"""DSA assistant backed by an OpenAI-compatible chat-completions endpoint.

The client never reads global state: everything it needs comes from the
ChatConfig handed to it.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional

import requests

from .. import config
from ..errors import InputFormatError
from .dsa_knowledge import SYSTEM_PROMPT, match_faq

logger = logging.getLogger(__name__)

RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please try again in a moment."
USAGE_LIMIT_MESSAGE = "AI usage limit reached. Please try again later."
NOT_CONFIGURED_MESSAGE = "AI is not configured. Please set ALGOVIZ_AI_API_KEY."
EMPTY_REPLY_MESSAGE = "I couldn't generate a response."


@dataclass(frozen=True)
class ChatConfig:
    provider: str = config.CHAT_PROVIDER
    api_key: Optional[str] = None
    model: str = config.CHAT_MODEL
    system_prompt: str = SYSTEM_PROMPT
    endpoint: str = config.CHAT_ENDPOINT
    fallback_models: List[str] = field(default_factory=lambda: list(config.CHAT_FALLBACK_MODELS))
    timeout: float = config.CHAT_TIMEOUT

    @classmethod
    def from_env(cls, environ=None):
        environ = os.environ if environ is None else environ
        return cls(
            provider=environ.get("ALGOVIZ_AI_PROVIDER", config.CHAT_PROVIDER),
            api_key=environ.get("ALGOVIZ_AI_API_KEY") or None,
            model=environ.get("ALGOVIZ_AI_MODEL", config.CHAT_MODEL),
            endpoint=environ.get("ALGOVIZ_AI_ENDPOINT", config.CHAT_ENDPOINT),
        )

    @property
    def candidate_models(self):
        models = [self.model]
        models.extend(m for m in self.fallback_models if m not in models)
        return models


@dataclass(frozen=True)
class ChatReply:
    text: str
    source: str  # "faq", "ai" or "error"


class ChatServiceError(Exception):
    """Raised for gateway answers that retrying another model cannot fix."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


def call_chat_api(url: str, token: str, model_name: str, messages: list, timeout: float):
    headers = {
        'Authorization': f'Bearer {token}',
        'Content-Type': 'application/json'
    }
    data = {
        "model": model_name,
        "messages": messages,
    }
    response = requests.post(url, headers=headers, json=data, timeout=timeout)
    if response.status_code == 429:
        raise ChatServiceError(RATE_LIMIT_MESSAGE, 429)
    if response.status_code == 402:
        raise ChatServiceError(USAGE_LIMIT_MESSAGE, 402)
    response.raise_for_status()
    return response.json()


def extract_content(payload):
    try:
        content = payload["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return None
    return content or None


class DSAChatClient:

    def __init__(self, chat_config=None):
        self.config = chat_config or ChatConfig()

    def build_messages(self, message):
        return [
            {"role": "system", "content": self.config.system_prompt},
            {"role": "user", "content": message},
        ]

    def ask(self, message):
        """
        Answer one question.

        FAQ matches are answered locally. Otherwise each candidate model is
        tried in turn; rate/usage limits stop immediately, other failures move
        on to the next model.
        """
        text = (message or "").strip()
        if not text:
            raise InputFormatError("Message must not be empty")

        faq_answer = match_faq(text)
        if faq_answer:
            return ChatReply(faq_answer, "faq")

        if not self.config.api_key:
            return ChatReply(NOT_CONFIGURED_MESSAGE, "error")

        messages = self.build_messages(text)
        last_error = None
        for model_name in self.config.candidate_models:
            try:
                payload = call_chat_api(self.config.endpoint, self.config.api_key, model_name,
                                        messages, self.config.timeout)
            except ChatServiceError as e:
                logger.warning("AI gateway refused the request: %s", e)
                return ChatReply(str(e), "error")
            except requests.exceptions.RequestException as e:
                logger.warning("Model %s failed: %s", model_name, e)
                last_error = e
                continue
            except json.JSONDecodeError as e:
                logger.warning("Model %s returned invalid JSON", model_name)
                last_error = e
                continue

            content = extract_content(payload)
            if content:
                return ChatReply(content, "ai")
            last_error = None
            logger.info("Model %s returned no content, trying the next one", model_name)

        if last_error is None:
            return ChatReply(EMPTY_REPLY_MESSAGE, "error")
        return ChatReply(f"AI request failed: {last_error}", "error")
