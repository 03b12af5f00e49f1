"""MyEcom management CLI.

Usage:
    python -m myecom.manage setup-db    # Create all tables
    python -m myecom.manage drop-db     # Drop all tables
    python -m myecom.manage serve       # Run the API with uvicorn
"""

import argparse
import sys

import structlog

logger = structlog.get_logger(__name__)


def setup_databases():
    from myecom.domain import init_domain
    from myecom.utils.db import setup_db

    providers = setup_db(init_domain())
    if not providers:
        logger.warning("No relational database configured, nothing to create")
    for name in providers:
        logger.info("Database schema ready", provider=name)


def drop_databases():
    from myecom.domain import init_domain
    from myecom.utils.db import drop_db

    for name in drop_db(init_domain()):
        logger.info("Database schema dropped", provider=name)


def serve(host: str, port: int, reload: bool):
    import uvicorn

    uvicorn.run("myecom.app:create_app", factory=True, host=host, port=port, reload=reload)


def main(argv=None):
    parser = argparse.ArgumentParser(description="MyEcom management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)
    serve_parser.add_argument("--reload", action="store_true")

    args = parser.parse_args(argv)

    if args.command == "setup-db":
        setup_databases()
    elif args.command == "drop-db":
        drop_databases()
    elif args.command == "serve":
        serve(args.host, args.port, args.reload)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
