"""
Command-line interface for FlickFinder.

Provides commands for:
- setup: Create the movies, people, stars and ratings tables
- seed: Load the reference dataset into empty tables
- status: Show row counts per table
- serve: Run the HTTP API with uvicorn
"""

import argparse
import sys
from typing import Optional

from .config import Config
from .database import DatabaseManager
from .exceptions import StoreError
from .seed import create_tables, seed_reference_data
from .utils import setup_logger


def _print_banner(text: str) -> None:
    print("=" * 60)
    print(text.center(60))
    print("=" * 60)


def _print_counts(counts: dict, title: str) -> None:
    """Print one "table: rows" line per table."""
    print(f"\n{title}")
    print("-" * 40)
    width = max((len(table) for table in counts), default=0) + 2
    for table, count in counts.items():
        print(f"  {table:<{width}}: {count:,}")
    print()


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser with all commands."""
    parser = argparse.ArgumentParser(
        prog="flickfinder",
        description="FlickFinder - read-only movie catalog API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Create tables and load the reference data
  python -m flickfinder setup
  python -m flickfinder seed

  # Check status
  python -m flickfinder status

  # Run the API on port 7000
  python -m flickfinder serve --port 7000
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("setup", help="Create missing tables")
    subparsers.add_parser("seed", help="Load the reference dataset into empty tables")
    subparsers.add_parser("status", help="Show row counts per table")

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", help="Bind address (default: API_HOST)")
    serve_parser.add_argument("--port", type=int, help="Port (default: API_PORT)")

    return parser


def cmd_setup(db: DatabaseManager) -> int:
    """Run setup command."""
    _print_banner("FlickFinder Setup")
    tables = create_tables(db.engine)
    print(f"Tables ready: {', '.join(tables)}")
    return 0


def cmd_seed(db: DatabaseManager) -> int:
    """Run seed command."""
    _print_banner("Seeding Reference Data")
    inserted = seed_reference_data(db.engine)
    _print_counts(inserted, title="Rows inserted")
    return 0


def cmd_status(db: DatabaseManager) -> int:
    """Run status command."""
    _print_banner("FlickFinder Status")
    try:
        status = db.get_status()
    except StoreError:
        print("Could not read table counts.")
        print("\nRun 'python -m flickfinder setup' to create missing tables.")
        return 1

    _print_counts(status, title="Database Status")
    return 0


def cmd_serve(db: DatabaseManager, config: Config, args) -> int:
    """Run the API server."""
    import uvicorn

    from api.main import create_app

    host = args.host or config.api_host
    port = args.port or config.api_port
    app = create_app(config=config, db=db)
    uvicorn.run(app, host=host, port=port, log_level="debug" if config.api_debug else "info")
    return 0


def main(args: Optional[list] = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.command:
        parser.print_help()
        return 0

    try:
        config = Config.from_env()
    except ValueError as e:
        print(f"Configuration error: {e}")
        print("\nSet DATABASE_URL, or SQL_HOST, SQL_USER, SQL_PASS, SQL_DB in your .env file.")
        return 1

    logger = setup_logger(__name__, config.log_dir)
    logger.info(f"Running command: {parsed_args.command}")
    db = DatabaseManager(config)

    try:
        if parsed_args.command == "setup":
            return cmd_setup(db)
        elif parsed_args.command == "seed":
            return cmd_seed(db)
        elif parsed_args.command == "status":
            return cmd_status(db)
        elif parsed_args.command == "serve":
            return cmd_serve(db, config, parsed_args)
        else:
            parser.print_help()
            return 0

    except KeyboardInterrupt:
        print("\n\nOperation cancelled.")
        return 130
    except Exception as e:
        logger.error(f"Command {parsed_args.command} failed: {e}", exc_info=True)
        print(f"\nError: {e}")
        return 1
    finally:
        db.dispose()


if __name__ == "__main__":
    sys.exit(main())
