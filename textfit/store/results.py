"""store/results.py — Lightweight fit ledger backed by SQLite."""

from __future__ import annotations

import json
import logging
import sqlite3
from pathlib import Path
from typing import Any, Sequence

from ..fitting.fitter import FitReport

logger = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS fits (
    id              INTEGER PRIMARY KEY AUTOINCREMENT,
    story           TEXT    NOT NULL,
    paragraph       INTEGER NOT NULL,
    outcome         TEXT    NOT NULL,
    target_lines    INTEGER NOT NULL,
    lines           INTEGER NOT NULL,
    original_values TEXT    NOT NULL,
    fitted_values   TEXT    NOT NULL,
    adjusted        INTEGER NOT NULL,
    evaluations     INTEGER,
    metadata        TEXT,
    created_at      TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);
"""


class ResultsDB:
    def __init__(self, db_path: str | Path = "textfit_results.sqlite") -> None:
        self._conn = sqlite3.connect(str(db_path))
        self._conn.execute("PRAGMA journal_mode=WAL;")
        self._conn.executescript(_SCHEMA)
        logger.info("Results DB opened at %s", db_path)

    def insert(
        self,
        story: str,
        paragraph: int,
        report: FitReport,
        axes: Sequence[str],
        metadata: dict[str, Any] | None = None,
    ) -> None:
        self._conn.execute(
            "INSERT INTO fits "
            "(story, paragraph, outcome, target_lines, lines, original_values, "
            "fitted_values, adjusted, evaluations, metadata) "
            "VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",
            (
                story,
                paragraph,
                report.outcome.value,
                report.target_lines,
                report.lines,
                json.dumps(dict(zip(axes, report.original_values))),
                json.dumps(dict(zip(axes, report.values))),
                int(report.adjusted),
                report.evaluations,
                json.dumps(metadata) if metadata else None,
            ),
        )
        self._conn.commit()

    def summary(self) -> dict[str, int]:
        """Number of recorded fits per outcome."""
        cur = self._conn.execute("SELECT outcome, COUNT(*) FROM fits GROUP BY outcome")
        return {outcome: count for outcome, count in cur.fetchall()}

    def failures(self) -> list[dict[str, Any]]:
        cur = self._conn.execute(
            "SELECT story, paragraph, target_lines, lines FROM fits "
            "WHERE outcome = 'cannot_fit' ORDER BY id",
        )
        cols = [d[0] for d in cur.description]
        return [dict(zip(cols, row)) for row in cur.fetchall()]

    def close(self) -> None:
        self._conn.close()
