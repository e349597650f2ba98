from __future__ import annotations

import argparse
import json
import logging
import os
from pathlib import Path
from typing import Optional

from .app import create_app
from .config import load_config, require
from .intake import process_submission
from .sheets import auth_sheets, open_spreadsheet


def setup_logging(log_file: Optional[Path], level: str = "INFO") -> None:
    lvl = getattr(logging, level.upper(), logging.INFO)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(
        level=lvl,
        format="%(asctime)sZ %(levelname)s %(name)s: %(message)s",
        handlers=handlers,
    )


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="form_intake")
    sub = p.add_subparsers(dest="cmd", required=True)

    def add_common(x):
        x.add_argument("--log-level", default=os.getenv("LOG_LEVEL", "INFO"))
        x.add_argument("--log-file", default=os.getenv("LOG_FILE", ""))
        x.add_argument("--sheet-id", default=os.getenv("GSHEET_ID"))
        x.add_argument("--sa-json", default=os.getenv("GOOGLE_APPLICATION_CREDENTIALS"))
        x.add_argument("--template", default=os.getenv("TEMPLATE_SHEET_NAME"))

    ps = sub.add_parser("serve", help="Run the webhook endpoint.")
    add_common(ps)
    ps.add_argument("--host", default=os.getenv("HOST", "0.0.0.0"))
    ps.add_argument("--port", type=int, default=int(os.getenv("PORT", "8080")))

    pj = sub.add_parser("submit", help="Record one submission read from a JSON file.")
    add_common(pj)
    pj.add_argument("--json-file", required=True, help="Path to a JSON object of field name -> value.")

    return p.parse_args(argv)


def run_serve(args: argparse.Namespace) -> int:
    setup_logging(Path(args.log_file) if args.log_file else None, args.log_level)
    log = logging.getLogger("form_intake.serve")

    cfg = load_config(sheet_id=args.sheet_id, sa_json=args.sa_json, template_name=args.template)
    app = create_app(cfg)
    log.info("Serving sheet=%s template=%r on %s:%s", cfg.sheet_id, cfg.template_name, args.host, args.port)
    app.run(host=args.host, port=args.port)
    return 0


def run_submit(args: argparse.Namespace) -> int:
    setup_logging(Path(args.log_file) if args.log_file else None, args.log_level)
    log = logging.getLogger("form_intake.submit")

    cfg = load_config(sheet_id=args.sheet_id, sa_json=args.sa_json, template_name=args.template)
    sa_json = require("GOOGLE_APPLICATION_CREDENTIALS/--sa-json", cfg.sa_json)

    fields = json.loads(Path(args.json_file).read_text(encoding="utf-8"))
    if not isinstance(fields, dict):
        raise SystemExit(f"{args.json_file} must contain a JSON object.")

    sh = open_spreadsheet(auth_sheets(sa_json), cfg.sheet_id)
    record = process_submission(sh, fields, cfg)
    log.info("Submit finished OK")
    print(record.title)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    if args.cmd == "serve":
        return run_serve(args)
    if args.cmd == "submit":
        return run_submit(args)
    raise SystemExit("Unknown command")
