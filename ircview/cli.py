# file: ircview/cli.py
import argparse
import logging
import sqlite3
import sys

from ircview.core.config import Settings
from ircview.db.archive import initialize_archive
from ircview.services.import_service import ImportService

log = logging.getLogger("cli")

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ircview", description="Archive IRC channel logs and serve them with full-text search.")
    parser.add_argument("--db-file", help="Path to the archive database (overrides IRCVIEW_DB_PATH).")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("init", help="Initialize (wipe and recreate) the archive database.")

    import_parser = subparsers.add_parser("import", help="Import log files into the archive, replacing its contents.")
    import_parser.add_argument("--src-dir", required=True, help="Root directory laid out as <channel>/<log_date>.txt")

    server_parser = subparsers.add_parser("server", help="Run the web API server.")
    server_parser.add_argument("--host", help="Bind address (overrides IRCVIEW_SERVER_HOST).")
    server_parser.add_argument("--port", type=int, help="Port (overrides IRCVIEW_SERVER_PORT).")
    server_parser.add_argument("--root", help="Path prefix when behind a proxy (overrides IRCVIEW_SERVER_ROOT).")
    return parser

def load_settings(args: argparse.Namespace) -> Settings:
    overrides = {}
    if args.db_file:
        overrides["DB_PATH"] = args.db_file
    if args.command == "server":
        if args.host:
            overrides["SERVER_HOST"] = args.host
        if args.port:
            overrides["SERVER_PORT"] = args.port
        if args.root is not None:
            overrides["SERVER_ROOT"] = args.root
    return Settings(**overrides)

def run_server(settings: Settings) -> None:
    import uvicorn
    from ircview.main import create_app

    log.info(f"Serving on {settings.SERVER_HOST}:{settings.SERVER_PORT} (root='{settings.SERVER_ROOT}')")
    uvicorn.run(create_app(settings), host=settings.SERVER_HOST, port=settings.SERVER_PORT)

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings(args)
    logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    if args.command == "init":
        try:
            initialize_archive(settings, reset=True)
        except (OSError, sqlite3.Error) as e:
            log.error(f"Init failed: {e}")
            return 1
        return 0

    if args.command == "import":
        try:
            initialize_archive(settings)
            summary = ImportService(settings).run(args.src_dir)
        except (OSError, sqlite3.Error) as e:
            log.error(f"Import failed: {e}")
            return 1
        log.info(summary.model_dump())
        return 0

    if args.command == "server":
        run_server(settings)
        return 0

    return 1

if __name__ == "__main__":
    sys.exit(main())
