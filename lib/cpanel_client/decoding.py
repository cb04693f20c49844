from __future__ import annotations

import json
from typing import Any

from .errors import DecodeError


def decode_json(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DecodeError(exc.msg, lineno=exc.lineno, colno=exc.colno, pos=exc.pos) from exc
