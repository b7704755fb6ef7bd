from __future__ import annotations

"""Opt-in milestone tracing (Explain Mode).

Enabled with ``--explain`` or ``explain: true`` in the config. Lines go to
stderr so they never mix with quiz output on stdout.
"""

import json
import sys
from typing import Any, Dict, Optional, TextIO

_ENABLED = False
_STREAM: Optional[TextIO] = None


def enable(flag: bool = True, stream: Optional[TextIO] = None) -> None:
    global _ENABLED, _STREAM
    _ENABLED = bool(flag)
    _STREAM = stream


def trace(event: str, payload: Dict[str, Any] | None = None) -> None:
    if not _ENABLED:
        return
    out = _STREAM if _STREAM is not None else sys.stderr
    body = json.dumps(payload or {}, separators=(",", ":"), sort_keys=True, default=str)
    print(f"[EXPLAIN] {event} :: {body}", file=out)
