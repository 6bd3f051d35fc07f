#!/usr/bin/env python3
"""
db_logger.py — SQLite run log for clipmanip.

Creates clipmanip.db in the given directory. Writes go through a dedicated
writer thread and queue so logging never blocks a run.

Schema:
    sessions(id, started_at, source, input_chars)
    log_entries(id, session_id, timestamp, tag, message, transform_name)

Only run metadata and log lines are stored, never clipboard text or results.
Auto-purges entries older than RETAIN_DAYS (default 30).
"""

import queue
import sqlite3
import threading
import uuid
from datetime import datetime, timedelta
from pathlib import Path

RETAIN_DAYS = 30
DB_NAME     = "clipmanip.db"


class DBLogger:
    def __init__(self, log_dir: str, source: str = "", input_chars: int = 0):
        folder = Path(log_dir).expanduser()
        folder.mkdir(parents=True, exist_ok=True)

        self._db_path   = str(folder / DB_NAME)
        self._queue     = queue.Queue()
        self._session   = str(uuid.uuid4())[:8]
        self._stop_evt  = threading.Event()

        self._init_db()
        self._start_session(source, input_chars)
        self._purge_old()

        self._writer = threading.Thread(target=self._writer_loop, daemon=True)
        self._writer.start()

    # ── Setup ─────────────────────────────────────────────────────────────────

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._db_path, timeout=10)
        conn.execute("PRAGMA journal_mode=WAL")
        return conn

    def _init_db(self):
        with self._connect() as conn:
            conn.executescript("""
                CREATE TABLE IF NOT EXISTS sessions (
                    id           TEXT PRIMARY KEY,
                    started_at   TEXT NOT NULL,
                    source       TEXT,
                    input_chars  INTEGER
                );
                CREATE TABLE IF NOT EXISTS log_entries (
                    id             INTEGER PRIMARY KEY AUTOINCREMENT,
                    session_id     TEXT NOT NULL,
                    timestamp      TEXT NOT NULL,
                    tag            TEXT NOT NULL,
                    message        TEXT NOT NULL,
                    transform_name TEXT
                );
                CREATE INDEX IF NOT EXISTS idx_log_session
                    ON log_entries(session_id);
                CREATE INDEX IF NOT EXISTS idx_log_transform
                    ON log_entries(transform_name);
            """)

    def _start_session(self, source: str, input_chars: int):
        with self._connect() as conn:
            conn.execute(
                "INSERT INTO sessions(id, started_at, source, input_chars) VALUES(?,?,?,?)",
                (self._session, datetime.now().isoformat(), source, input_chars)
            )

    def _purge_old(self):
        cutoff = (datetime.now() - timedelta(days=RETAIN_DAYS)).isoformat()
        with self._connect() as conn:
            conn.execute(
                "DELETE FROM log_entries WHERE timestamp < ?", (cutoff,)
            )
            conn.execute(
                "DELETE FROM sessions WHERE started_at < ? "
                "AND id NOT IN (SELECT DISTINCT session_id FROM log_entries)",
                (cutoff,)
            )

    # ── Writer thread ─────────────────────────────────────────────────────────

    def _writer_loop(self):
        conn = self._connect()
        while not self._stop_evt.is_set() or not self._queue.empty():
            try:
                item = self._queue.get(timeout=0.2)
            except queue.Empty:
                continue
            if item is None:
                self._queue.task_done()
                break
            try:
                conn.execute(
                    "INSERT INTO log_entries"
                    "(session_id, timestamp, tag, message, transform_name)"
                    " VALUES(?,?,?,?,?)",
                    item
                )
                conn.commit()
            except sqlite3.Error:
                # a log line that cannot be written is dropped, the run goes on
                pass
            finally:
                self._queue.task_done()
        conn.close()

    # ── Public API ────────────────────────────────────────────────────────────

    def log(self, message: str, tag: str = "info", transform_name: str = ""):
        self._queue.put((
            self._session,
            datetime.now().isoformat(),
            tag,
            message,
            transform_name,
        ))

    def flush(self):
        """Block until every queued line has been written."""
        self._queue.join()

    @property
    def session_id(self) -> str:
        return self._session

    @property
    def db_path(self) -> str:
        return self._db_path

    def stop(self):
        self._stop_evt.set()
        self._queue.put(None)
        self._writer.join(timeout=3)


def failure_counts(log_dir: str) -> dict:
    """
    {transform_name: number of 'err' entries} across all sessions.
    Opens the database read-only; a missing database has no failures.
    """
    path = (Path(log_dir).expanduser() / DB_NAME).resolve()
    if not path.exists():
        return {}
    conn = sqlite3.connect(f"{path.as_uri()}?mode=ro", uri=True, timeout=10)
    try:
        rows = conn.execute(
            "SELECT transform_name, COUNT(*) FROM log_entries "
            "WHERE tag = 'err' AND transform_name != '' "
            "GROUP BY transform_name ORDER BY COUNT(*) DESC, transform_name"
        ).fetchall()
    finally:
        conn.close()
    return {name: count for name, count in rows}
