"""Run the webhook server: ``python -m yt_summary_bot``."""

import uvicorn

from yt_summary_bot.config import get_settings

if __name__ == "__main__":
    uvicorn.run("yt_summary_bot.app:app", host="0.0.0.0", port=get_settings().port)
