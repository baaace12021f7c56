import logging
import os
from typing import List, Tuple

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from fastapi.middleware.cors import CORSMiddleware

from algorithms.kmp import kmp_build_lps, kmp_find_all
from utils.logging_config import setup_logging

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="KMP Search API", version="1.0")

# CORS for demos; restrict origins in production
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def max_text_chars() -> int:
    return int(os.getenv("KMP_MAX_TEXT_CHARS", "1000000"))


def max_pattern_chars() -> int:
    return int(os.getenv("KMP_MAX_PATTERN_CHARS", "10000"))


class SearchRequest(BaseModel):
    text: str
    pattern: str

class SearchResponse(BaseModel):
    pattern: str
    count: int
    matches: List[int]
    spans: List[Tuple[int, int]]  # (start, len)

class LpsRequest(BaseModel):
    pattern: str

class LpsResponse(BaseModel):
    pattern: str
    lps: List[int]


def _check_size(field: str, value: str, limit: int):
    if len(value) > limit:
        logger.warning("rejected %s of %d chars (limit %d)", field, len(value), limit)
        raise HTTPException(
            status_code=413,
            detail=f"{field} is {len(value)} characters; the limit is {limit}",
        )


@app.get("/health")
def health():
    return {"ok": True}

@app.post("/api/search", response_model=SearchResponse)
def search(req: SearchRequest):
    _check_size("text", req.text, max_text_chars())
    _check_size("pattern", req.pattern, max_pattern_chars())
    matches = kmp_find_all(req.text, req.pattern)
    logger.info("search text=%d pattern=%d matches=%d", len(req.text), len(req.pattern), len(matches))
    return SearchResponse(
        pattern=req.pattern,
        count=len(matches),
        matches=matches,
        spans=[(i, len(req.pattern)) for i in matches],
    )

@app.post("/api/lps", response_model=LpsResponse)
def lps(req: LpsRequest):
    _check_size("pattern", req.pattern, max_pattern_chars())
    logger.info("lps pattern=%d", len(req.pattern))
    return LpsResponse(pattern=req.pattern, lps=kmp_build_lps(req.pattern))

# Run with: uvicorn api.main:app --host 0.0.0.0 --port 8000
