from __future__ import annotations

from typing import Callable, List
import logging

from fastapi import FastAPI, Depends
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from jobfeed.api.deps import feed_collector
from jobfeed.config import cors_origins
from jobfeed.core.listing import Feed, FeedMetadata, Listing


# -------------------------
# FastAPI setup
# -------------------------
app = FastAPI(title="Job Feed API", version="0.1.0")
LOGGER = logging.getLogger(__name__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(),
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)


# -------------------------
# Pydantic response models
# -------------------------
class ListingsResponse(BaseModel):
    listings: List[Listing]
    metadata: FeedMetadata


class ErrorOut(BaseModel):
    error: str
    details: str


# -------------------------
# Routes
# -------------------------
@app.get("/", tags=["meta"])
async def root():
    return {"message": "Job Feed API is running"}


@app.get("/healthz", tags=["meta"])
async def healthz():
    return {"status": "ok"}


@app.get(
    "/listings",
    response_model=ListingsResponse,
    responses={500: {"model": ErrorOut}},
    tags=["data"],
)
async def get_listings(collect: Callable[[], Feed] = Depends(feed_collector)):
    """Fetch all curated sources and return the merged, newest-first feed.

    Every call re-fetches upstream; nothing is cached between requests.
    """
    try:
        feed = await run_in_threadpool(collect)
    except Exception as err:
        LOGGER.error("Error fetching listings: %s", err, exc_info=True)
        body = ErrorOut(error="Failed to fetch data", details=str(err) or "Unknown error")
        return JSONResponse(status_code=500, content=body.model_dump())

    return ListingsResponse(listings=feed.listings, metadata=feed.metadata)
