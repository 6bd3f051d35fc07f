#!/usr/bin/env python3
"""
clipmanip.py - Show every interpretation of the clipboard text at once.

Reads the clipboard (or stdin / an argument), runs the whole transform
catalog over it (hex, Base64, URL, HTML, JWT, JSON, timestamps, hashes,
case conversions, number bases) and prints the labeled results. One result
can be copied straight back to the clipboard.

Features:
  - Empty results and results with invalid characters hidden by default
  - One-line list view or indented Markdown blocks
  - Display defaults from clipmanip.ini
  - Optional SQLite run log (failures per transform)

Usage:
    python clipmanip.py [--text TEXT | --stdin] [--only LABEL ...]
                        [--copy LABEL] [--markdown] [--all]
                        [--config clipmanip.ini] [--log-db DIR]

clipmanip.ini format:
    [display]
    show_empty = false
    markdown = false
    hide = Raw, Calculate md5

    [log]
    db_dir = ~/.clipmanip
"""

import argparse
import configparser
import sys
from datetime import datetime
from pathlib import Path

try:
    import pyperclip
except ImportError:
    print("Missing dependency: pip install pyperclip")
    sys.exit(1)

from db_logger import DBLogger, failure_counts
from manipulations import MANIPULATIONS, get_manipulation, manipulate_string

REPLACEMENT_CHAR = "\ufffd"
DEFAULT_INI      = Path(__file__).parent / "clipmanip.ini"


class ClipManipError(Exception):
    """Raised for user errors: unreadable input, unknown labels."""


# ─── INI loader ──────────────────────────────────────────────────────────────

def load_ini(path) -> configparser.ConfigParser:
    """Load clipmanip.ini if it exists."""
    cfg = configparser.ConfigParser()
    ini_path = Path(path).expanduser()
    if ini_path.exists():
        cfg.read(ini_path, encoding="utf-8")
    return cfg


def get_display_options(cfg: configparser.ConfigParser) -> dict:
    """
    Return display options from the [display] section.
    Each item: {show_empty: bool, markdown: bool, hide: [label]}
    """
    raw = cfg.get("display", "hide", fallback="")
    return {
        "show_empty": cfg.getboolean("display", "show_empty", fallback=False),
        "markdown":   cfg.getboolean("display", "markdown", fallback=False),
        "hide":       [s.strip() for s in raw.split(",") if s.strip()],
    }


def get_log_dir(cfg: configparser.ConfigParser):
    return cfg.get("log", "db_dir", fallback=None) or None


# ─── Presentation ────────────────────────────────────────────────────────────

def is_displayable(value: str) -> bool:
    """False for empty values and values holding U+FFFD (bad decodes)."""
    return bool(value) and REPLACEMENT_CHAR not in value


def format_subtitle(value: str) -> str:
    """Collapse newline runs to single spaces for a one-line preview."""
    return " ".join(part for part in value.split("\n") if part)


def format_markdown(value: str) -> str:
    """Render value as an indented Markdown code block."""
    body = "\n".join("    " + line for line in value.split("\n"))
    return "\n".join(["    ", body, "    "])


def resolve_labels(keys: list) -> list:
    """Map user-supplied labels or names to catalog labels."""
    labels = []
    for key in keys:
        entry = get_manipulation(key)
        if entry is None:
            raise ClipManipError(f"Unknown transform: {key!r}")
        labels.append(entry["label"])
    return labels


def select_results(results: list, only: list = None, hide: list = None,
                   show_empty: bool = False) -> list:
    """Filter runner output for display without changing its order."""
    only = set(only or [])
    hide = set(hide or [])
    selected = []
    for result in results:
        if only and result.label not in only:
            continue
        if result.label in hide and result.label not in only:
            continue
        if not show_empty and not is_displayable(result.value):
            continue
        selected.append(result)
    return selected


def render(results: list, markdown: bool = False) -> str:
    if markdown:
        return "\n\n".join(
            f"### {r.label}\n\n{format_markdown(r.value)}" for r in results
        )
    width = max((len(r.label) for r in results), default=0)
    return "\n".join(
        f"{r.label.ljust(width)}  │ {format_subtitle(r.value)}" for r in results
    )


# ─── App ─────────────────────────────────────────────────────────────────────

class ClipManipCLI:
    def __init__(self, args: argparse.Namespace, cfg: configparser.ConfigParser,
                 out=None, err=None):
        self.args    = args
        self.cfg     = cfg
        self.out     = out or sys.stdout
        self.err     = err or sys.stderr
        self.verbose = args.verbose
        self.db: DBLogger = None

        self.failure_count = 0

    # ── Logging ───────────────────────────────────────────────────────────────

    def _log(self, message: str, tag: str = "info", transform_name: str = ""):
        if tag == "err" and transform_name:
            self.failure_count += 1
        if self.db is not None:
            self.db.log(message, tag, transform_name)
        # per-transform failures reach stderr only in verbose mode
        if self.verbose:
            visible = tag != "debug"
        else:
            visible = tag in ("warn", "err") and not transform_name
        if visible:
            ts = datetime.now().strftime("%H:%M:%S")
            print(f"[{ts}] {message}", file=self.err)

    # ── Input ─────────────────────────────────────────────────────────────────

    def _read_input(self):
        if self.args.text is not None:
            return self.args.text, "argument"
        if self.args.stdin:
            return sys.stdin.read(), "stdin"
        try:
            clip = pyperclip.paste()
        except Exception as exc:
            raise ClipManipError(f"Clipboard read error: {exc}")
        return clip or "", "clipboard"

    def _copy(self, value: str, label: str):
        try:
            pyperclip.copy(value)
        except Exception as exc:
            raise ClipManipError(f"Clipboard write error: {exc}")
        self._log(f"✓ [{label}] {len(value)} chars written to clipboard", "ok")

    # ── Commands ──────────────────────────────────────────────────────────────

    def list_catalog(self) -> int:
        width = max(len(m["label"]) for m in MANIPULATIONS)
        for m in MANIPULATIONS:
            print(f"{m['label'].ljust(width)}  {m['description']}", file=self.out)
        return 0

    def show_failures(self, log_dir: str) -> int:
        for name, count in failure_counts(log_dir).items():
            print(f"{count:6d}  {name}", file=self.out)
        return 0

    def run(self) -> int:
        try:
            return self._run()
        except ClipManipError as exc:
            self._log(str(exc), "err")
            return 1

    def _run(self) -> int:
        display = get_display_options(self.cfg)
        log_dir = self.args.log_db or get_log_dir(self.cfg)

        if self.args.list:
            return self.list_catalog()
        if self.args.failures:
            if not log_dir:
                raise ClipManipError("--failures needs --log-db or [log] db_dir")
            return self.show_failures(log_dir)

        only = resolve_labels(self.args.only or [])
        copy_label = resolve_labels([self.args.copy])[0] if self.args.copy else None

        text, source = self._read_input()
        if log_dir:
            self.db = DBLogger(log_dir, source=source, input_chars=len(text))

        try:
            self._log(f"▶ {len(MANIPULATIONS)} transforms via {source} ({len(text)} chars)", "info")
            results = manipulate_string(text, log=self._log)
            self._log(f"{len(results) - self.failure_count} ok, {self.failure_count} failed", "info")

            if copy_label:
                value = next(r.value for r in results if r.label == copy_label)
                if not value:
                    raise ClipManipError(f"[{copy_label}] has no result for this input")
                self._copy(value, copy_label)
                return 0

            shown = select_results(
                results,
                only=only,
                hide=resolve_labels(display["hide"]),
                show_empty=self.args.all or display["show_empty"],
            )
            markdown = self.args.markdown or display["markdown"]
            if shown:
                print(render(shown, markdown=markdown), file=self.out)
            return 0
        finally:
            if self.db is not None:
                self.db.stop()
                self.db = None


# ─── Entry point ──────────────────────────────────────────────────────────────

def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Run every clipboard transform over one text and show the results."
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--text", "-t", default=None,
                        help="Use TEXT instead of the clipboard.")
    source.add_argument("--stdin", action="store_true",
                        help="Read the input from stdin instead of the clipboard.")
    parser.add_argument("--only", "-o", action="append", metavar="LABEL",
                        help="Show only this transform (label or name, repeatable).")
    parser.add_argument("--copy", "-c", default=None, metavar="LABEL",
                        help="Copy the result of this transform to the clipboard.")
    parser.add_argument("--all", "-a", action="store_true",
                        help="Also show empty and invalid results.")
    parser.add_argument("--markdown", "-m", action="store_true",
                        help="Render each value as an indented Markdown block.")
    parser.add_argument("--list", "-l", action="store_true",
                        help="List the transform catalog and exit.")
    parser.add_argument("--config", default=str(DEFAULT_INI),
                        help="Ini file with display defaults (default: <script dir>/clipmanip.ini).")
    parser.add_argument("--log-db", default=None, metavar="DIR",
                        help="Log runs and failures to DIR/clipmanip.db.")
    parser.add_argument("--failures", action="store_true",
                        help="Print failure counts per transform from the run log and exit.")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log every step to stderr.")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    return ClipManipCLI(args, load_ini(args.config)).run()


if __name__ == "__main__":
    sys.exit(main())
