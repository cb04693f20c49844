from __future__ import annotations


def parse_params(items: list[str] | None) -> dict[str, str]:
    """Turn repeated ``key=value`` options into a mapping; later keys win."""
    params: dict[str, str] = {}
    for item in items or []:
        key, sep, value = item.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ValueError(f"Invalid parameter {item!r}, expected key=value")
        params[key] = value
    return params
