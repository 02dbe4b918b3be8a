#!/usr/bin/env python3
"""
Bank Ledger Entry Point

Starts the FastAPI server on the configured host and port.
"""

import sys

from bank_ledger.api import run_server
from bank_ledger.config import get_config
from bank_ledger.logging_config import setup_logging


if __name__ == "__main__":
    config = get_config()
    logger = setup_logging(config.log_level, log_format=config.log_format, log_file=config.log_file)
    logger.info(
        f"Starting Bank Ledger API on {config.api_host}:{config.api_port} "
        f"(storage: {config.storage_backend})"
    )

    try:
        run_server(host=config.api_host, port=config.api_port)
    except KeyboardInterrupt:
        logger.info("Shutting down Bank Ledger API")
    except Exception as e:
        logger.error(f"Error starting server: {e}")
        sys.exit(1)
