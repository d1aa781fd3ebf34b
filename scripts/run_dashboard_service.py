"""
DASHBOARD Service Launcher

Starts the Hosted Hub dashboard GUI (Flask).

The dashboard keeps no data of its own: every page and every browser
health-check poll goes through the hub API.

Usage:
    python scripts/run_dashboard_service.py

Environment Variables:
    HUB_API_BASE_URL: Hub API base URL (default: http://127.0.0.1:8010)
    HUB_GUI_PORT: Flask server port (default: 5000)
    HUB_GUI_BIND_HOST: Flask bind address (default: 0.0.0.0)
    HUB_GUI_DEBUG: Enable Flask debug mode (default: false)
    HEALTHCHECK_POLL_SECONDS: Browser re-poll interval per service (default: 30)
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from hub.config import HUB_API_BASE_URL, GUI_BIND_HOST, GUI_PORT, GUI_DEBUG, LOG_LEVEL
from shared.logging_config import setup_logging
from dashboard.service import app


def main():
    """Main entrypoint for the dashboard service."""
    parser = argparse.ArgumentParser(description="Run the Hosted Hub dashboard GUI")
    parser.add_argument("--host", default=GUI_BIND_HOST)
    parser.add_argument("--port", type=int, default=GUI_PORT)
    parser.add_argument("--log-file", default=None)
    args = parser.parse_args()

    logger = setup_logging("dashboard", level=LOG_LEVEL, log_file=args.log_file)
    logger.info(f"Hub API: {HUB_API_BASE_URL}")
    logger.info(f"Dashboard available at: http://{args.host}:{args.port}")
    logger.info(f"Debug Mode: {GUI_DEBUG}")

    app.run(host=args.host, port=args.port, debug=GUI_DEBUG)
    return 0


if __name__ == "__main__":
    sys.exit(main())
