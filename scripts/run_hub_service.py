"""
HUB Service Launcher

Starts the Hosted Hub API (servers, services, health-check proxy).

Usage:
    python scripts/run_hub_service.py --host 0.0.0.0 --port 8010

Environment Variables:
    HUB_API_PORT: API port (default: 8010)
    HUB_API_BIND_HOST: Bind address (default: 0.0.0.0)
    HUB_DB_URL: SQLAlchemy database URL (default: sqlite:///hub/data/servers.db)
    HUB_SEED_SAMPLE_DATA: Seed sample servers into an empty database (default: false)
    HUB_LOG_LEVEL: Logging level (default: INFO)
"""
import argparse
import os
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import uvicorn

from hub.config import HUB_API_BIND_HOST, HUB_API_PORT, DATABASE_URL, LOG_LEVEL
from shared.logging_config import setup_logging


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the Hosted Hub API service")
    parser.add_argument("--host", default=HUB_API_BIND_HOST)
    parser.add_argument("--port", type=int, default=HUB_API_PORT)
    parser.add_argument("--log-file", default=None)
    args = parser.parse_args()

    logger = setup_logging("hub", level=LOG_LEVEL, log_file=args.log_file)
    logger.info(f"API Address: {args.host}:{args.port}")
    logger.info(f"Database: {DATABASE_URL}")

    os.environ["HUB_API_PORT"] = str(args.port)
    os.environ["HUB_API_BIND_HOST"] = args.host

    uvicorn.run("hub.service:app", host=args.host, port=args.port, reload=False)


if __name__ == "__main__":
    main()
