from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ControllerResponse:
    """Formatted output of a controller call.

    `is_error` lets the CLI pick its exit code; MCP tools return `content`
    as-is either way.
    """

    content: str
    is_error: bool = False


def error_response(prefix: str, exc: BaseException) -> ControllerResponse:
    return ControllerResponse(content=f"{prefix}: {exc}", is_error=True)


def site_base_url(site_name: str | None) -> str | None:
    """Web UI base for relative `_links.webui` paths."""

    site = (site_name or "").strip()
    if not site:
        return None
    return f"https://{site}.atlassian.net/wiki"
