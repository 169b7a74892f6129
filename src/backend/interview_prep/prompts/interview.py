"""Prompt templates for interview question generation and answer feedback.

Versioned so we can track which prompt produced which feedback.
"""

from interview_prep.models.schemas import SimilarityResult

PROMPT_VERSION = "v1.0"

QUESTION_SYSTEM_PROMPT = """\
You are an experienced interviewer preparing a candidate for a job interview.

Rules:
- Ask questions that are specific to the job description and practical
- Never ask about protected characteristics (age, gender, race, religion, etc.)
- Output ONLY a numbered list of questions. No other text."""

QUESTION_PROMPT_TEMPLATE = """\
Based on this job description, generate exactly 3 interview questions that would \
be relevant for this position. Make them specific and practical.

Job Description:
{job_description}

Format your response as a numbered list of questions only."""

FEEDBACK_SYSTEM_PROMPT = """\
You are an AI interviewer evaluating a candidate's response. Be specific and \
vary your feedback based on the actual content.

Rules:
- Score from 1-10 where 10 is excellent
- Ground your feedback in the job requirements and the candidate's background
- Never include protected characteristics (age, gender, race, religion, etc.) in your feedback
- Output ONLY the Score, Feedback and Follow-up lines in the format requested."""

FEEDBACK_PROMPT_TEMPLATE = """\
## Job Requirements
{job_description}

## Candidate's Resume/Background
{resume_text}
{context_section}
## Candidate's Response
"{message}"

## Instructions
Please provide:
1. A score from 1-10 (where 10 is excellent)
2. Constructive feedback (max 100 words) - BE SPECIFIC to this response
3. Suggestions for improvement
4. A follow-up question if appropriate

Format your response as:
Score: [number]
Feedback: [your feedback]
Follow-up: [optional follow-up question]"""

CONTEXT_SECTION_TEMPLATE = """
## Most Relevant Document Excerpts
{excerpts}
"""

FALLBACK_QUESTIONS = """\
1. Tell me about your relevant experience for this position.
2. What interests you most about this role and our company?
3. How do your skills align with the requirements mentioned in the job description?"""

WELCOME_TEMPLATE = """\
Welcome to your interview preparation session! I've prepared some questions for you. Let's start:

{questions}

Please answer the first question, and I'll provide feedback based on your resume and the job requirements."""


def build_question_prompt(job_description: str) -> tuple[str, str]:
    """Returns (system_prompt, user_prompt)."""
    return QUESTION_SYSTEM_PROMPT, QUESTION_PROMPT_TEMPLATE.format(job_description=job_description)


def format_excerpts(citations: list[SimilarityResult]) -> str:
    return "\n".join(
        f"[{c.source_type.value}, similarity {c.similarity:.2f}] {c.text}"
        for c in citations
    )


def build_feedback_prompt(
    job_description: str,
    resume_text: str,
    message: str,
    citations: list[SimilarityResult] | None = None,
) -> tuple[str, str]:
    """Build system + user prompts for evaluating one answer.

    Ranked excerpts, when given, are added as an extra context section.
    Returns (system_prompt, user_prompt).
    """
    context_section = ""
    if citations:
        context_section = CONTEXT_SECTION_TEMPLATE.format(excerpts=format_excerpts(citations))

    user_prompt = FEEDBACK_PROMPT_TEMPLATE.format(
        job_description=job_description,
        resume_text=resume_text,
        context_section=context_section,
        message=message,
    )
    return FEEDBACK_SYSTEM_PROMPT, user_prompt


def build_welcome_message(questions: str) -> str:
    return WELCOME_TEMPLATE.format(questions=questions)
