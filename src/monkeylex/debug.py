"""Human-readable and JSON token dumps."""

from __future__ import annotations

import json
import sys
from collections.abc import Iterable
from typing import TextIO

from monkeylex.tokens import Token

# Widest kind name is "SEMICOLON"
_KIND_WIDTH = 9


def dump_tokens(tokens: Iterable[Token], *, file: TextIO = sys.stderr) -> None:
    """Print one `KIND 'text'` line per token to *file*."""
    for tok in tokens:
        file.write(f"{tok.kind.name:<{_KIND_WIDTH}} {tok.text!r}\n")


def tokens_to_json(tokens: Iterable[Token]) -> str:
    return json.dumps([{"kind": t.kind.name, "text": t.text} for t in tokens], indent=2) + "\n"
