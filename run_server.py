"""Serve the job portal API with uvicorn. Use: python run_server.py [--host H] [--port P]"""

from __future__ import annotations

import argparse

import uvicorn

from job_portal.api import create_app
from job_portal.config import settings


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Run the job portal HTTP API.")
    p.add_argument("--host", type=str, default=settings.host)
    p.add_argument("--port", type=int, default=settings.port)
    return p.parse_args()


def main() -> None:
    args = parse_args()
    uvicorn.run(create_app(settings), host=args.host, port=args.port)


if __name__ == "__main__":
    main()
