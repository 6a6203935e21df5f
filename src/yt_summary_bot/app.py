"""FastAPI application with lifespan and health endpoint."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from yt_summary_bot.config import get_settings
from yt_summary_bot.context import build_bot_context
from yt_summary_bot.logging_config import configure_logging
from yt_summary_bot.slack.router import router as slack_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: configure logging, load config, and build clients on startup."""
    settings = get_settings()
    configure_logging(settings.log_level)
    app.state.settings = settings
    app.state.bot = build_bot_context(settings)
    yield


app = FastAPI(
    title="YouTube Summary Bot",
    lifespan=lifespan,
)
app.include_router(slack_router)


@app.get("/health")
async def health():
    """Health check endpoint for the hosting platform and local development."""
    return {
        "status": "ok",
        "service": "yt-summary-bot",
        "version": "0.1.0",
    }
