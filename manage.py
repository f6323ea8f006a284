#!/usr/bin/env python3
"""
POS ledger management CLI.

Usage:
    python manage.py serve              Start the API server (PORT / API_PORT, default 3000)
    python manage.py migrate [--status] Apply pending schema migrations
    python manage.py seed [--dir DIR]   Import products.json / stock.json / sales.json
    python manage.py export --dir DIR   Write the three JSON documents from the database
    python manage.py report             Print the sales report
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

from src.config import configure_logging, get_settings
from src.core.exceptions import POSError


def cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "src.api.main:app",
        host=args.host or settings.api.host,
        port=args.port or settings.api.port,
        reload=args.reload,
    )
    return 0


async def _migrate(args: argparse.Namespace) -> int:
    from src.infrastructure.storage.sqlite.migrations import (
        get_migration_status,
        run_migrations,
    )

    if args.status:
        status = await get_migration_status()
        print(f"Database exists: {status['exists']}")
        print(f"Current version: {status.get('current_version') or 'N/A'}")
        print(f"Applied migrations: {status.get('applied_migrations', [])}")
        print(f"Pending migrations: {status.get('pending_migrations', [])}")
        if status.get("missing_tables"):
            print(f"Missing tables: {status['missing_tables']}")
        return 0

    results = await run_migrations()
    if not results:
        print("Schema is up to date.")
    for result in results:
        state = "SUCCESS" if result.success else "FAILED"
        print(f"[{state}] v{result.version}: {result.name} ({result.execution_time_ms}ms)")
        if result.error:
            print(f"         Error: {result.error}")
    return 0 if all(r.success for r in results) else 1


async def _seed(args: argparse.Namespace) -> int:
    from src.infrastructure.storage import read_documents
    from src.infrastructure.storage.sqlite import (
        close_pool,
        import_documents,
        is_database_empty,
    )
    from src.infrastructure.storage.sqlite.migrations import run_migrations

    seed_dir = args.dir or get_settings().storage.seed_dir
    documents = read_documents(seed_dir)

    await run_migrations()
    try:
        if not args.force and not await is_database_empty():
            print("Database already holds data; use --force to reload products and stock.")
            return 1
        await import_documents(documents, replace=args.force)
    finally:
        await close_pool()

    print(
        f"Imported {len(documents.products)} products, "
        f"{len(documents.stock)} stock records, {len(documents.sales)} sales from {seed_dir}"
    )
    return 0


async def _export(args: argparse.Namespace) -> int:
    from src.infrastructure.storage import write_documents
    from src.infrastructure.storage.sqlite import close_pool, export_documents

    try:
        documents = await export_documents()
    finally:
        await close_pool()

    for path in write_documents(args.dir, documents):
        print(f"Wrote {path}")
    return 0


async def _report(args: argparse.Namespace) -> int:
    from src.application.use_cases import GenerateReportUseCase
    from src.infrastructure.storage import bootstrap_storage, shutdown_storage

    await bootstrap_storage()
    try:
        use_case = GenerateReportUseCase()
        report = use_case.to_response(await use_case.execute())
    finally:
        await shutdown_storage()

    print(json.dumps(report.model_dump(by_alias=True), indent=2))
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(
        description="POS ledger management",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Start the API server")
    serve.add_argument("--host", help="Bind address (default from settings)")
    serve.add_argument("--port", type=int, help="Port (default from PORT/API_PORT)")
    serve.add_argument("--reload", action="store_true", help="Auto-reload on code changes")

    migrate = sub.add_parser("migrate", help="Apply schema migrations")
    migrate.add_argument("--status", action="store_true", help="Show migration status only")

    seed = sub.add_parser("seed", help="Import flat-file JSON documents")
    seed.add_argument("--dir", type=Path, help="Directory holding the JSON documents")
    seed.add_argument(
        "--force",
        action="store_true",
        help="Clear products and stock before importing (journal is only appended)",
    )

    export = sub.add_parser("export", help="Export the database as flat-file JSON documents")
    export.add_argument("--dir", type=Path, required=True, help="Target directory")

    sub.add_parser("report", help="Print the sales report")

    args = parser.parse_args()
    configure_logging()

    if args.command == "serve":
        return cmd_serve(args)

    handlers = {
        "migrate": _migrate,
        "seed": _seed,
        "export": _export,
        "report": _report,
    }
    try:
        return asyncio.run(handlers[args.command](args))
    except POSError as e:
        print(f"Error [{e.code}]: {e.message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
