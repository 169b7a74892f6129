"""Offline answer feedback, used when the LLM cannot evaluate an answer.

Answers mentioning a known topic get that topic's template; anything else gets
one of the generic templates. All randomness (template choice and score) comes
from the injected ``random.Random`` so results are reproducible under a seed.
"""

import random
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass

from interview_prep.models.schemas import Feedback

FALLBACK_SCORE_RANGE = (6, 8)


@dataclass(frozen=True)
class FeedbackTemplate:
    keywords: frozenset[str]
    feedback: str
    follow_up: str


KEYWORD_TEMPLATES = (
    FeedbackTemplate(
        keywords=frozenset({"experience", "worked"}),
        feedback=(
            "Great! You've mentioned your experience. To make it even stronger, "
            "try quantifying your achievements with specific numbers or metrics."
        ),
        follow_up="Can you share a specific project where you made a measurable impact?",
    ),
    FeedbackTemplate(
        keywords=frozenset({"skill", "technology"}),
        feedback=(
            "Good technical awareness! Consider explaining how you've applied "
            "these skills in real-world scenarios."
        ),
        follow_up="What was the most challenging technical problem you solved using these skills?",
    ),
    FeedbackTemplate(
        keywords=frozenset({"team", "collaborate"}),
        feedback="Excellent focus on teamwork! Employers value collaboration skills highly.",
        follow_up="Tell me about a time when you had to resolve a conflict within your team.",
    ),
    FeedbackTemplate(
        keywords=frozenset({"learn", "growth"}),
        feedback=(
            "I appreciate your growth mindset! Continuous learning is crucial "
            "in today's fast-paced environment."
        ),
        follow_up="What's a recent skill you've learned that you're excited to apply?",
    ),
)

GENERIC_FEEDBACK = (
    "Solid response! You're communicating clearly and showing good understanding of the role.",
    "Nice answer! You're demonstrating relevant knowledge for this position.",
    "Well articulated! Your response shows thoughtful consideration of the question.",
    "Good insight! You're connecting your background well to what the role requires.",
)
GENERIC_FOLLOW_UP = "Can you elaborate on that with a specific example?"


def format_feedback(score: int, feedback: str, follow_up: str) -> str:
    return f"Score: {score}/10\n\nFeedback: {feedback}\n\nFollow-up: {follow_up}"


class FeedbackStrategy(ABC):
    @abstractmethod
    def evaluate(self, message: str) -> Feedback:
        ...


class KeywordFeedbackStrategy(FeedbackStrategy):
    def __init__(self, rng: random.Random | None = None):
        self._rng = rng or random.Random()

    @staticmethod
    def match_template(message: str) -> FeedbackTemplate | None:
        """First template (in priority order) whose keywords appear as words in ``message``."""
        words = set(re.findall(r"[a-z]+", message.lower()))
        for template in KEYWORD_TEMPLATES:
            if template.keywords & words:
                return template
        return None

    def evaluate(self, message: str) -> Feedback:
        template = self.match_template(message)
        if template is not None:
            feedback, follow_up = template.feedback, template.follow_up
        else:
            feedback, follow_up = self._rng.choice(GENERIC_FEEDBACK), GENERIC_FOLLOW_UP

        score = self._rng.randint(*FALLBACK_SCORE_RANGE)
        return Feedback(score=score, response=format_feedback(score, feedback, follow_up))
