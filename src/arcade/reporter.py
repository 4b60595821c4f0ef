# reporter.py
"""Fire-and-forget submission of final scores to the remote score service."""
from __future__ import annotations
import logging
import threading
from typing import Optional

import requests  # type: ignore

from .config import ReporterConfig

log = logging.getLogger(__name__)


class ReportError(Exception):
    """The score service rejected a submission."""


def submit_score(game_name: str, score: int, user_id: str,
                 cfg: Optional[ReporterConfig] = None,
                 session: Optional[requests.Session] = None) -> bool:
    """
    POST the score. Returns True on success, False on any failure; failures
    are logged and never raised.
    """
    cfg = cfg or ReporterConfig()
    http = session or requests
    try:
        resp = http.post(
            f"{cfg.api_base}/score",
            json={"gameName": game_name, "score": score, "userId": user_id},
            timeout=cfg.timeout_s,
        )
        if not resp.ok:
            raise ReportError(resp.text or "Failed to submit score")
        return True
    except (requests.RequestException, ReportError) as e:
        log.warning("submitScore failed: %s", e)
        return False


class ScoreReporter:
    """Runs `submit_score` on a daemon thread so gameplay never waits on it."""

    def __init__(self, cfg: Optional[ReporterConfig] = None):
        self.cfg = cfg or ReporterConfig()

    def report(self, game_name: str, score: int, user_id: str) -> threading.Thread:
        t = threading.Thread(
            target=submit_score,
            args=(game_name, score, user_id, self.cfg),
            name=f"score-report-{game_name}",
            daemon=True,
        )
        t.start()
        log.info("Reporting %s score %d for user %s", game_name, score, user_id)
        return t

    __call__ = report
