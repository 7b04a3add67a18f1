"""
AI Detector FastAPI Application.

Pattern-based PHP analyzer: AI-authorship heuristics plus security/quality defects.
  POST /analyze → FileResult / DirectoryResult for a server-side path
  POST /report  → SonarQube generic issues plus summary
  POST /scan    → analyze inline file contents
  GET  /health  → {"status": "ok", ...}
"""

from __future__ import annotations

import logging

from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ai_detector.api.routes.analyze import router as analyze_router
from ai_detector.api.routes.health import router as health_router
from ai_detector.config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("ai_detector")

app = FastAPI(
    title="AI Code Analyzer",
    description="Detects AI-generated code patterns and common AI coding errors",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(analyze_router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    body = await request.body()
    logger.error(f"Validation Error. Raw body: {body.decode('utf-8')[:500]} | Errors: {exc.errors()}")
    return JSONResponse(
        status_code=422,
        content={"detail": exc.errors(), "body": body.decode("utf-8")[:100]},
    )
