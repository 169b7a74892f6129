"""LLM integration via LangChain + OpenAI for questions and answer feedback.

Both calls degrade gracefully: question generation falls back to a fixed set of
questions and answer evaluation falls back to a ``FeedbackStrategy``.
"""

import logging
import re

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI

from interview_prep.core.config import Settings
from interview_prep.models.schemas import Feedback, SimilarityResult
from interview_prep.prompts.interview import (
    FALLBACK_QUESTIONS,
    build_feedback_prompt,
    build_question_prompt,
)
from interview_prep.services.feedback import FeedbackStrategy

logger = logging.getLogger(__name__)

DEFAULT_SCORE = 7
MIN_SCORE, MAX_SCORE = 1, 10

_SCORE_RE = re.compile(r"Score:\s*(\d+)", re.IGNORECASE)


def get_chat_model(settings: Settings) -> BaseChatModel | None:
    """Create a ChatOpenAI instance, or None when no API key is configured."""
    if not settings.openai_api_key:
        return None
    return ChatOpenAI(
        model=settings.openai_model,
        api_key=settings.openai_api_key,
        temperature=0.7,
        max_tokens=800,
        timeout=settings.llm_timeout,
    )


def parse_score(text: str) -> int:
    """Pull the ``Score: N`` value out of a feedback reply, clamped to 1-10."""
    match = _SCORE_RE.search(text)
    if match is None:
        return DEFAULT_SCORE
    return max(MIN_SCORE, min(MAX_SCORE, int(match.group(1))))


def message_text(content: str | list) -> str:
    """Plain text of a chat message; list content keeps only its text blocks."""
    if isinstance(content, str):
        return content
    parts = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


async def _complete(llm: BaseChatModel, system_prompt: str, user_prompt: str) -> str:
    response = await llm.ainvoke([
        SystemMessage(content=system_prompt),
        HumanMessage(content=user_prompt),
    ])
    text = message_text(response.content)
    if not text.strip():
        raise ValueError("LLM returned an empty response")
    return text.strip()


async def generate_questions(llm: BaseChatModel | None, job_description: str) -> str:
    """Ask the LLM for three interview questions about the job description."""
    if llm is None:
        logger.warning("No chat model configured, using fallback questions")
        return FALLBACK_QUESTIONS

    system_prompt, user_prompt = build_question_prompt(job_description)
    try:
        questions = await _complete(llm, system_prompt, user_prompt)
    except Exception as exc:
        logger.warning("Question generation failed, using fallback questions: %r", exc)
        return FALLBACK_QUESTIONS

    logger.info("Generated interview questions (%d chars)", len(questions))
    return questions


async def evaluate_answer(
    llm: BaseChatModel | None,
    strategy: FeedbackStrategy,
    job_description: str,
    resume_text: str,
    message: str,
    citations: list[SimilarityResult] | None = None,
) -> Feedback:
    """Score a candidate answer with the LLM, or with ``strategy`` if that fails."""
    if llm is None:
        logger.warning("No chat model configured, using fallback feedback")
        return strategy.evaluate(message)

    system_prompt, user_prompt = build_feedback_prompt(
        job_description=job_description,
        resume_text=resume_text,
        message=message,
        citations=citations,
    )
    try:
        reply = await _complete(llm, system_prompt, user_prompt)
    except Exception as exc:
        logger.warning("Answer evaluation failed, using fallback feedback: %r", exc)
        return strategy.evaluate(message)

    logger.info("LLM feedback received: %s", reply[:100])
    return Feedback(score=parse_score(reply), response=reply)
