import sys
import json
import signal
import logging
import argparse
import threading

from core.config_loader import load_config
from database.database import configure_database
from database.init_db import init_db
from pipeline.runner import run_matching_pipeline

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Set on SIGINT/SIGTERM; the sweep stops before the next job
stop_event = threading.Event()


def signal_handler(sig, frame):
    logger.info("Shutdown signal received")
    stop_event.set()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Job matching driver")
    parser.add_argument('--user-id', required=True, help='Profile id of the user to match')
    parser.add_argument('--config', default='config.yaml', help='Path to config.yaml')
    parser.add_argument('--init-db', action='store_true', help='Create missing tables before matching')
    args = parser.parse_args(argv)

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    config = load_config(args.config)
    configure_database(config.database.url)

    if args.init_db:
        # Initialize DB (with retry logic)
        init_db()

    result = run_matching_pipeline(config, args.user_id, stop_event=stop_event)

    if not result.success:
        logger.error(f"Matching failed: {result.error}")
        print(json.dumps({'success': False, 'error': result.error}))
        return 1

    print(json.dumps({'success': True, **result.summary()}))
    return 0


if __name__ == "__main__":
    sys.exit(main())
