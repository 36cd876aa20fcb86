#!/usr/bin/env python3
"""
KPT Board API Server

Runs the FastAPI application with uvicorn.

Usage:
    python run_server.py [--host HOST] [--port PORT] [--reload]

Options:
    --host HOST   Interface to bind (default from KPT_SERVER_HOST or 127.0.0.1)
    --port PORT   Port to bind (default from KPT_SERVER_PORT or 8000)
    --reload      Restart on code changes (development only)
"""

import argparse
import logging

import uvicorn
from dotenv import load_dotenv

from kpt_board.core.config import get_settings

# Load environment variables from .env file
load_dotenv()


def main():
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Run the KPT board API server")
    parser.add_argument("--host", default=settings.server.host, help="Interface to bind")
    parser.add_argument("--port", type=int, default=settings.server.port, help="Port to bind")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes")
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logging.getLogger(__name__).info(f"Listening on {args.host}:{args.port}")

    uvicorn.run(
        "kpt_board.api.server:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
