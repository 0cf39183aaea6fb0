#!/usr/bin/env python3
"""
Command-line interface for the slug redirect service.

Works directly against the configured store (CONNECTION_STRING, API_KEY and
DEFAULT_URL are read from the environment or .env, as for the server).

Usage:
    python redirect_cli.py register <slug> <url>
    python redirect_cli.py resolve <slug>
    python redirect_cli.py health
"""

import argparse
import asyncio
import json
import sys
import os

# Add parent directories to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from pydantic import ValidationError as ConfigError

from config import load_config
from redirector.database.factory import create_store
from redirector.errors import RedirectorError
from redirector.resolver import SlugResolver
from redirector.registrar import SlugRegistrar
from redirector.common.logging_config import setup_logging


class RedirectCLI:
    """Command-line interface for slug registration and lookup."""

    def __init__(self, config, verbose: bool = False):
        """Initialize CLI."""
        self.config = config
        self.logger = setup_logging(level="DEBUG" if verbose else "WARNING")
        self.store = create_store(config, logger=self.logger)
        self.resolver = SlugResolver(self.store, config.default_url, logger=self.logger)
        self.registrar = SlugRegistrar(self.store, config.api_key, logger=self.logger)

    async def cleanup(self):
        """Cleanup resources."""
        await self.store.close()

    async def register(self, slug: str, url: str) -> int:
        """Register a slug using the configured API key."""
        try:
            mapping = await self.registrar.register(slug, url, self.config.api_key)
        except RedirectorError as e:
            print(json.dumps(e.to_dict(), indent=2))
            return 1

        print(json.dumps(mapping.to_dict(), indent=2))
        return 0

    async def resolve(self, slug: str) -> int:
        """Show where a slug redirects."""
        target = await self.resolver.resolve(slug)
        print(json.dumps({
            "slug": slug,
            "url": target.url,
            "status_code": target.status_code,
            "fallback": target.fallback,
        }, indent=2))
        return 0

    async def health(self) -> int:
        """Check store connectivity."""
        healthy = await self.store.health_check()
        print(json.dumps({"database": "healthy" if healthy else "unhealthy"}, indent=2))
        return 0 if healthy else 1


async def main():
    parser = argparse.ArgumentParser(description="Slug redirect CLI")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    subparsers = parser.add_subparsers(dest="command", required=True)

    register_parser = subparsers.add_parser("register", help="Register a slug")
    register_parser.add_argument("slug", help="Slug to register")
    register_parser.add_argument("url", help="Destination URL")

    resolve_parser = subparsers.add_parser("resolve", help="Resolve a slug")
    resolve_parser.add_argument("slug", help="Slug to resolve")

    subparsers.add_parser("health", help="Check store health")

    args = parser.parse_args()

    try:
        config = load_config()
    except ConfigError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    try:
        cli = RedirectCLI(config, verbose=args.verbose)
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 1

    try:
        if args.command == "register":
            return await cli.register(args.slug, args.url)
        if args.command == "resolve":
            return await cli.resolve(args.slug)
        return await cli.health()
    finally:
        await cli.cleanup()


if __name__ == "__main__":
    exit_code = asyncio.run(main())
    sys.exit(exit_code)
