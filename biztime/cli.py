#!/usr/bin/env python3
"""
Operator commands for the BizTime API.

Usage:
    biztime init-db
    biztime seed
    biztime serve --host 0.0.0.0 --port 8000
"""

import argparse
import logging

from dotenv import load_dotenv

from biztime.core.config import get_settings
from biztime.core.db import Database
from biztime.core.seed import seed_sample_data

logger = logging.getLogger("biztime.cli")


def cmd_init_db(db: Database, args) -> None:
    db.create_all()


def cmd_seed(db: Database, args) -> None:
    db.create_all()
    with db.session() as session:
        seed_sample_data(session)
    logger.info("Sample companies and invoices loaded")


def cmd_serve(db: Database, args) -> None:
    import uvicorn

    uvicorn.run("biztime.main:app", host=args.host, port=args.port, reload=args.reload)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="biztime", description="BizTime API tools")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("init-db", help="Create the companies and invoices tables").set_defaults(func=cmd_init_db)
    sub.add_parser("seed", help="Reset tables to the sample data").set_defaults(func=cmd_seed)

    serve = sub.add_parser("serve", help="Run the API with uvicorn")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    serve.add_argument("--reload", action="store_true")
    serve.set_defaults(func=cmd_serve)

    return parser


def main(argv=None) -> None:
    load_dotenv()
    args = build_parser().parse_args(argv)

    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    )

    db = Database(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
    try:
        args.func(db, args)
    finally:
        db.dispose()


if __name__ == "__main__":
    main()
