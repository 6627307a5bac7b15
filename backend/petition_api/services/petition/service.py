import asyncio
import logging
from typing import Any

import openai
from fastapi import Depends
from langchain_core.messages import SystemMessage, HumanMessage

from petition_api.core.config import Settings, get_settings
from petition_api.core.errors import DownstreamFailure
from petition_api.core.factory import get_llm
from petition_api.services.petition.models import PetitionRequest
from petition_api.services.petition.prompts import build_prompts

logger = logging.getLogger(__name__)

OPENAI_ERROR_FALLBACK = "OpenAI API 오류"


def _status_error_message(error: openai.APIStatusError) -> str:
    """Provider's own error message from the response body, if any."""
    body: Any = error.body
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message:
            return message
    return OPENAI_ERROR_FALLBACK


class CompletionInvoker:
    """
    Single chat-completion call per petition.

    No retries, streaming or explicit timeout; a hung provider hangs the
    request until the platform gives up.
    """

    def __init__(self, settings: Settings):
        self.settings = settings

    async def complete(self, api_key: str, system_prompt: str, user_prompt: str) -> str:
        llm = get_llm(
            api_key,
            self.settings.LLM_MODEL,
            self.settings.LLM_TEMPERATURE,
            self.settings.LLM_MAX_TOKENS,
        )
        try:
            response = await asyncio.to_thread(
                llm.invoke,
                [SystemMessage(content=system_prompt), HumanMessage(content=user_prompt)]
            )
        except openai.APIStatusError as e:
            logger.error(f"Completion API returned {e.status_code}: {e}")
            raise DownstreamFailure(_status_error_message(e)) from e
        except Exception as e:
            logger.error(f"Completion API call failed: {e}")
            raise DownstreamFailure(str(e) or None) from e

        content = response.content if isinstance(response.content, str) else ""
        if not content.strip():
            logger.error("Completion API returned an empty choice")
            raise DownstreamFailure()
        return content


class PetitionService:
    def __init__(self, invoker: CompletionInvoker):
        self.invoker = invoker

    async def generate(self, api_key: str, request: PetitionRequest) -> str:
        """Build both prompts and return the drafted petition text."""
        system_prompt, user_prompt = build_prompts(request)
        logger.info(f"Drafting petition for case {request.case_number}")
        return await self.invoker.complete(api_key, system_prompt, user_prompt)


def get_petition_service(settings: Settings = Depends(get_settings)) -> PetitionService:
    """Dependency for API routes."""
    return PetitionService(CompletionInvoker(settings))
