#!/usr/bin/env python3
"""
DNS Endpoints - Main Entry Point

This is the main entry point for the DNS Endpoints CLI.
It can be run directly or imported as a module.
"""

from dns_endpoints.cli.main import main

if __name__ == "__main__":
    main()
