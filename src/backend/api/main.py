"""
FastAPI application for pain.001 validation.

Run:
    uvicorn api.main:app --reload --port 5000

Example:
    curl -X POST "http://127.0.0.1:5000/upload" -F "file=@/path/to/payment.xml"
"""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from common.pain001_rules import Pain001Error

from .pain001 import router
from .settings import get_cors_origins

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="pain.001 Validator",
    description="Upload SEPA credit transfer initiation files and run institution rule sets against them.",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(Pain001Error)
async def pain001_error_handler(request: Request, exc: Pain001Error) -> JSONResponse:
    if exc.status_code >= 500:
        logger.warning("%s %s failed: %s (%s)", request.method, request.url.path, exc.message, exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


app.include_router(router)
