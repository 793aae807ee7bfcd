"""
grocery-list: form server for parsed grocery lists.

Run with: uvicorn grocery_list.main:app --reload

Serves:
- the grocery form endpoint the replay step submits items to
- list parsing endpoints (text in, records or CSV out)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from grocery_list.config import get_settings
from grocery_list.api import health, lists, submissions
from grocery_list.services.submissions import SubmissionStore

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown."""
    logger.info("Starting grocery-list form server...")
    yield
    logger.info(f"Shutting down, {len(app.state.submission_store)} submissions received")


app = FastAPI(
    title="grocery-list",
    description="Grocery list parsing and form submission API",
    version="0.1.0",
    lifespan=lifespan,
)
# Available before startup so test clients without lifespan still work
app.state.submission_store = SubmissionStore()

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, tags=["health"])
app.include_router(lists.router)  # /api/lists
app.include_router(submissions.router)  # /api/submissions


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "grocery-list",
        "version": "0.1.0",
        "description": "Parses hand-written grocery lists and accepts form submissions",
        "docs": "/docs",
        "endpoints": {
            "health": "/health",
            "lists": "/api/lists",
            "submissions": "/api/submissions",
        },
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "grocery_list.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=not settings.is_production,
    )
