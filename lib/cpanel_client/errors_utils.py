from __future__ import annotations

from typing import Any


def extract_api_error(result: Any) -> str | None:
    """Return the application-level error carried by a decoded response, if any."""
    if not isinstance(result, dict):
        return None

    metadata = result.get("metadata")
    if isinstance(metadata, dict) and str(metadata.get("result", "1")) == "0":
        return str(metadata.get("reason") or "request failed")

    cpanelresult = result.get("cpanelresult")
    if isinstance(cpanelresult, dict) and cpanelresult.get("error"):
        return str(cpanelresult["error"])

    inner = result.get("result")
    if isinstance(inner, dict):
        errors = inner.get("errors")
        if isinstance(errors, list) and errors:
            return "; ".join(str(e) for e in errors)
        if str(inner.get("status", "1")) == "0":
            return str(inner.get("statusmsg") or "request failed")

    if result.get("error"):
        return str(result["error"])
    if "status" in result and str(result.get("status")) == "0":
        return str(result.get("statusmsg") or result.get("reason") or "request failed")
    return None
