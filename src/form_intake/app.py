from __future__ import annotations

import logging
from typing import Callable, Optional

from flask import Flask, Response, request

from .config import IntakeConfig, require
from .form_mapping import normalize_request
from .intake import process_submission
from .sheets import store_opener

log = logging.getLogger("form_intake.app")

ACK_BODY = "Form data received"
HEALTH_BODY = '{"status":"ok"}'


def _text(body: str) -> Response:
    return Response(body, status=200, mimetype="text/plain")


def create_app(cfg: IntakeConfig, open_store: Optional[Callable] = None) -> Flask:
    """Build the webhook app.

    Submissions always answer 200: upstream form hooks retry or disable the
    integration on error statuses, so failures go into the body and the log.
    """
    if open_store is None:
        open_store = store_opener(require("GOOGLE_APPLICATION_CREDENTIALS/--sa-json", cfg.sa_json))

    app = Flask(__name__)

    @app.get("/")
    @app.get("/health")
    def health():
        return Response(HEALTH_BODY, status=200, mimetype="application/json")

    @app.post("/")
    def submit():
        try:
            fields = normalize_request(request)
            sh = open_store(cfg.sheet_id)
            process_submission(sh, fields, cfg)
        except Exception as e:
            log.exception("Submission failed")
            return _text(f"Error: {e}")
        return _text(ACK_BODY)

    return app
