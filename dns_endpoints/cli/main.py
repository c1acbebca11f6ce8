#!/usr/bin/env python3
"""
DNS Endpoints - Command Line Interface

Main entry point for the DNS Endpoints CLI.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict

import yaml

from ..core.endpoint_manager import EndpointManager
from ..parsers.manifest import ManifestParser

logger = logging.getLogger(__name__)


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="DNS Endpoints - List and diff the DNS endpoints owned by an owner id"
    )

    parser.add_argument(
        "--config",
        "-c",
        default="configs/config.yaml",
        help="Configuration file path (default: configs/config.yaml)",
    )

    parser.add_argument(
        "--owner-id", "-o", help="Owner id to filter by (default: owner_id from config)"
    )

    parser.add_argument(
        "--desired",
        "-d",
        help="DNSEndpoint manifest with the desired endpoints to diff against",
    )

    parser.add_argument(
        "--output-file",
        "-f",
        help="File to save the owned endpoints to as a DNSEndpoint manifest",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )

    args = parser.parse_args()

    if not Path(args.config).exists():
        print(f"Error: Configuration file '{args.config}' not found")
        sys.exit(1)

    if args.desired and not Path(args.desired).exists():
        print(f"Error: Desired manifest '{args.desired}' not found")
        sys.exit(1)

    config = load_config(args.config)
    config_logger(config, verbose=args.verbose)

    try:
        endpoint_manager = EndpointManager(config)
        desired = ManifestParser(args.desired).parse() if args.desired else None

        success = endpoint_manager.process(
            owner_id=args.owner_id,
            desired=desired,
            output_file=args.output_file,
        )

        if success:
            print("Endpoint processing completed successfully")
            sys.exit(0)
        else:
            print("Endpoint processing failed")
            sys.exit(1)

    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        sys.exit(1)


def load_config(config_path: str) -> Dict:
    """Load configuration from YAML file."""
    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f) or {}
        logger.info(f"Configuration loaded from {config_path}")
        return config
    except FileNotFoundError:
        logger.warning(f"Config file {config_path} not found, using defaults")
        return get_default_config()
    except yaml.YAMLError as e:
        logger.error(f"Error parsing config file: {e}")
        sys.exit(1)


def get_default_config() -> Dict:
    """Return default configuration."""
    return {
        "owner_id": "default",
        "sources": [],
        "logging": {"level": "INFO", "file": "dns_endpoints.log"},
    }


def config_logger(config: Dict, verbose: bool = False):
    """Configure logging."""
    logging_config = config.get("logging", None)
    if logging_config:
        log_level = "DEBUG" if verbose else logging_config.get("level", "INFO")
        log_file = logging_config.get("file", "dns_endpoints.log")

        logging.basicConfig(
            level=log_level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            handlers=[
                logging.FileHandler(log_file),
                logging.StreamHandler(sys.stdout),
            ],
        )
        return

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


if __name__ == "__main__":
    main()
