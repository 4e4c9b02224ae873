"""
Command-line interface for the album catalogue.

Usage:
    python -m albums.cli serve                     Start the web server
    python -m albums.cli init-db                   Create the album table
    python -m albums.cli init-db --reset --sample-data
"""

import argparse
import asyncio
import logging
import sys

from albums.config import Config, load_config, setup_logging

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace, config: Config) -> int:
    """Start the web server."""
    import uvicorn

    from albums.web.app import create_app

    host = args.host or config.web.host
    port = args.port or config.web.port

    app = create_app(config)

    print(f"Albums:   http://{host}:{port}/album")
    print(f"API docs: http://{host}:{port}/docs")
    print()

    try:
        uvicorn.run(app, host=host, port=port, log_level=config.logging.level.lower())
    except KeyboardInterrupt:
        print("\nServer stopped.")

    return 0


async def _init_db(config: Config, reset: bool, sample_data: bool) -> int:
    from albums.persistence import AlbumTable, create_schema, drop_schema, load_sample_data
    from albums.registry import create_engine_from_config

    engine = create_engine_from_config(config.database)
    try:
        if reset:
            await drop_schema(engine)
        await create_schema(engine)
        if sample_data:
            await load_sample_data(engine)
        return await AlbumTable(engine).count()
    finally:
        await engine.dispose()


def cmd_init_db(args: argparse.Namespace, config: Config) -> int:
    """Create the schema and optionally seed sample albums."""
    if args.reset:
        print("Dropping existing album table (all rows will be lost)")

    try:
        count = asyncio.run(_init_db(config, args.reset, args.sample_data))
    except Exception as e:
        logger.exception(f"Database initialization failed: {e}")
        print(f"Error initializing database: {e}")
        return 1

    print(f"Database ready: {count} album(s)")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Album Catalogue - manage a catalogue of music albums",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to configuration file",
    )
    parser.add_argument(
        "--log-level",
        "-l",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level override",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # serve command
    serve_parser = subparsers.add_parser("serve", help="Start the web server")
    serve_parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Bind host (default: from config)",
    )
    serve_parser.add_argument(
        "--port",
        "-p",
        type=int,
        default=None,
        help="Bind port (default: from config)",
    )
    serve_parser.set_defaults(func=cmd_serve)

    # init-db command
    init_parser = subparsers.add_parser("init-db", help="Create the album table")
    init_parser.add_argument(
        "--reset",
        action="store_true",
        help="Drop the table before creating it (deletes all data)",
    )
    init_parser.add_argument(
        "--sample-data",
        action="store_true",
        help="Insert a handful of sample albums",
    )
    init_parser.set_defaults(func=cmd_init_db)

    args = parser.parse_args(argv)

    # Load config and set up logging
    config = load_config(args.config)
    if args.log_level:
        config.logging.level = args.log_level
    setup_logging(config.logging)

    if args.command is None:
        parser.print_help()
        return 1

    return args.func(args, config)


if __name__ == "__main__":
    sys.exit(main())
