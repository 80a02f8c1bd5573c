"""CLI entry point.

This script runs one aggregated search across the job providers and writes
the merged response to disk.

Examples:
    python run_fetch.py --out jobs.json
    python run_fetch.py --out jobs.json --query "python developer" --location berlin
    python run_fetch.py --out jobs.json --source remotive,arbeitnow

The output is the serialized search response: totalCount, sources and jobs.
"""

from __future__ import annotations

import argparse
import asyncio
from pathlib import Path

from job_portal.aggregator import JobAggregator
from job_portal.config import settings
from job_portal.logger import configure_logging
from job_portal.sources import build_sources


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Fetch and normalize jobs from multiple providers.")
    p.add_argument("--out", type=str, default="jobs.json", help="Output JSON file path.")
    p.add_argument("--query", type=str, default=None, help="Optional keyword passed to every provider.")
    p.add_argument("--location", type=str, default=None, help="Optional location hint.")
    p.add_argument(
        "--source",
        type=str,
        default=None,
        help="Comma-separated providers (jsearch, remotive, arbeitnow) or 'all' (default).",
    )
    return p.parse_args()


def main() -> None:
    args = parse_args()
    configure_logging(settings.log_level)

    aggregator = JobAggregator(build_sources(settings))
    result = asyncio.run(aggregator.search(args.query, args.location, args.source))

    out_path = Path(args.out).expanduser().resolve()
    out_path.parent.mkdir(parents=True, exist_ok=True)

    # Pydantic v2: json mode serializes datetimes; by_alias gives the camelCase wire shape
    out_path.write_text(result.model_dump_json(by_alias=True, indent=2), encoding="utf-8")

    print(f"Wrote {result.total_count} jobs from {', '.join(result.sources) or 'no sources'} to: {out_path}")


if __name__ == "__main__":
    main()
