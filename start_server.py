#!/usr/bin/env python3
"""
Startup script for the Taskboard Backend
This script starts the FastAPI server with the configured host/port
"""

import logging

import uvicorn

from taskboard.config.settings import settings

logger = logging.getLogger("start_server")

def main():
    logging.basicConfig(level=settings.LOG_LEVEL)
    logger.info(f"Starting Taskboard Backend on {settings.HOST}:{settings.PORT} (reload={settings.RELOAD})")

    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        log_level=settings.LOG_LEVEL.lower()
    )

if __name__ == "__main__":
    main()
