from __future__ import annotations

"""CLI for the trivia quiz using SessionManager and the JSON store."""

import argparse
import os
import sys
from typing import Any, Callable, Dict, Optional

from .. import __version__
from ..config.config import load_config, resolve_data_path, validate_config
from ..stats.stats import report
from ..storage.store import TriviaFileMissing, TriviaStore
from ..util.randomness import seed_if_needed
from . import presenter
from .explain import enable as explain_enable, trace as xtrace
from .modes import resolve_command
from .session_manager import SessionManager

MISSING_HINT = "Run /end-day first to generate questions."


def _build_ui(*, clear_screen: bool) -> Dict[str, Callable[..., Any]]:
    def ask(prompt: str) -> Optional[str]:
        try:
            return input(prompt)
        except (EOFError, KeyboardInterrupt):
            # Closed stdin or Ctrl-C ends the session like "q".
            print()
            return None

    def inform(msg: str) -> None:
        print(msg)

    def clear() -> None:
        if clear_screen:
            sys.stdout.write(presenter.CLEAR_SCREEN)
            sys.stdout.flush()

    return {"ask": ask, "inform": inform, "clear": clear}


def _parse_args(argv: Optional[list[str]]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="trivia", description="Personal trivia quiz")
    p.add_argument("command", nargs="?", default=None, help="stats | code | biz | help | <filter>")
    p.add_argument("filter", nargs="?", default=None, help="System filter for the biz command")
    p.add_argument("--config", default=None, help="Path to YAML config")
    p.add_argument("--explain", action="store_true", help="Trace quiz milestones to stderr")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    return p.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    args = _parse_args(argv)
    if args.version:
        print(f"trivia {__version__}")
        return 0

    inv = resolve_command(args.command, args.filter)
    if inv.mode == "help":
        # Usage needs no config or data file.
        print(presenter.usage(presenter.make_palette(not os.environ.get("NO_COLOR"))))
        return 0

    cfg = validate_config(load_config(args.config))
    if args.explain or cfg["explain"]:
        explain_enable(True)
    xtrace("config_loaded", {"data_path": cfg["data"]["path"], "ui": cfg["ui"]})

    palette = presenter.make_palette(cfg["ui"]["color"])
    seed_if_needed()
    store = TriviaStore(resolve_data_path(cfg))
    try:
        data = store.load()
    except TriviaFileMissing as e:
        print(f"{e}. {MISSING_HINT}", file=sys.stderr)
        return 1
    xtrace(
        "data_loaded",
        {
            "path": str(store.path),
            "questions": len(data.questions),
            "code_reviews": len(data.all_code_reviews()),
        },
    )

    if inv.mode == "stats":
        print(report(data, palette))
        return 0

    sm = SessionManager(store, data, palette)
    sm.start_session(inv.mode, inv.filter)
    sm.run(_build_ui(clear_screen=cfg["ui"]["clear_screen"]))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
