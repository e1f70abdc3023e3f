# apps/cli/serve.py
"""
CLI: run the wordhint HTTP API with uvicorn.

Settings come from WORDHINT_* environment variables (see
wordhint/service/config.py); flags given here override them.

Usage:
    WORDHINT_SECRET=change-me python -m apps.cli.serve --port 8080 --backend array
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
from typing import List, Optional

import uvicorn

from apps.cli.filter import positive_int
from wordhint.corpus import get_corpus_ids
from wordhint.service import Settings, create_app


def settings_from_args(args: argparse.Namespace, base: Settings) -> Settings:
    """Overlay explicitly given flags on top of `base`."""
    overrides = {
        "words": args.words,
        "backend": args.backend,
        "sqlite_path": args.sqlite_path,
        "max_results": args.max_results,
        "log_level": args.log_level.upper() if args.log_level else None,
    }
    return dataclasses.replace(base, **{k: v for k, v in overrides.items() if v is not None})


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="wordhint: run the HTTP API")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--words", help="word list file")
    ap.add_argument("--backend", choices=get_corpus_ids(), help="corpus backend")
    ap.add_argument("--sqlite-path", help="database for the sqlite backend")
    ap.add_argument("--max-results", type=positive_int, help="cap on words returned per request")
    ap.add_argument("--log-level", help="DEBUG, INFO, WARNING, ...")
    args = ap.parse_args(argv)

    settings = settings_from_args(args, Settings.from_env())
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = create_app(settings)
    uvicorn.run(app, host=args.host, port=args.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
