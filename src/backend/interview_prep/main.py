"""FastAPI application entry point."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from interview_prep.api.routes import router
from interview_prep.core.config import settings
from interview_prep.core.logging_config import configure_logging

configure_logging(settings.log_level)

app = FastAPI(
    title="Interview Prep - AI Mock Interviews",
    description="""
Practice interviews grounded in your own resume and the job you are applying for.

## How It Works
1. **Upload your resume and a job description** as PDFs -- text is extracted,
   split into word chunks, and each chunk is embedded
2. **Start a session** -- the AI asks three questions about the job
3. **Answer** -- each answer gets a 1-10 score, feedback, a follow-up question,
   and citations: the resume / job description excerpts most similar to it

## Identity
No auth. Send an `X-User-Id` header to keep documents apart; without it every
request uses the demo user.
""",
    version="1.0.0",
    openapi_tags=[
        {"name": "Documents", "description": "Upload, list and delete resume / job description PDFs"},
        {"name": "Chat", "description": "Interview questions and scored answers"},
    ],
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router, prefix="/api/v1")


@app.get("/health", tags=["System"])
async def health():
    """Health check endpoint used by Docker."""
    return {"status": "ok", "has_openai_key": bool(settings.openai_api_key)}
