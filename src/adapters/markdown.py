"""Markdown rendering of Confluence models.

Why in adapters:
- Markdown is an output detail shared by the CLI and the MCP tools; the
  domain models know nothing about it.
- Page bodies arrive as HTML (`view` format) and are flattened to text
  with BeautifulSoup.
"""

from __future__ import annotations

from datetime import datetime, timezone

from bs4 import BeautifulSoup

from core.domain.models import (
    Label,
    OptionalFieldList,
    PageDetailed,
    PagesResponse,
    SpaceDetailed,
    SpacesResponse,
)

NO_SPACES_MESSAGE = "No Confluence spaces found."
NO_PAGES_MESSAGE = "No Confluence pages found."


def format_datetime(value: datetime) -> str:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
        return value.strftime("%Y-%m-%d %H:%M:%S UTC")
    return value.strftime("%Y-%m-%d %H:%M:%S")


def absolute_url(webui: str, base_url: str | None) -> str:
    if not base_url or webui.startswith("http"):
        return webui
    return f"{base_url.rstrip('/')}/{webui.lstrip('/')}"


BLOCK_TAGS = (
    "p", "div", "pre", "blockquote",
    "h1", "h2", "h3", "h4", "h5", "h6",
    "ul", "ol", "li", "table", "tr",
)
CELL_TAGS = ("td", "th")


def html_to_text(html: str) -> str:
    """Flatten an HTML fragment to text.

    Block elements and `<br>` end a line. Inline markup stays on the line of
    the text around it, and runs of whitespace collapse to one space.
    """

    if not html:
        return ""
    soup = BeautifulSoup(html, "html.parser")
    for br in soup.find_all("br"):
        br.replace_with("\n")
    for tag in soup.find_all(BLOCK_TAGS):
        tag.insert_before("\n")
        tag.insert_after("\n")
    for cell in soup.find_all(CELL_TAGS):
        cell.insert_after(" ")
    lines = (" ".join(line.split()) for line in soup.get_text().splitlines())
    return "\n".join(line for line in lines if line)


def _label_lines(labels: OptionalFieldList[Label] | None, empty: str) -> list[str]:
    if labels is None or not labels.results:
        return [empty]
    return [f"- {label.name}" for label in labels.results]


def _footer(kind: str, url: str, retrieved_at: datetime | None) -> list[str]:
    retrieved_at = retrieved_at or datetime.now(timezone.utc)
    return [
        "",
        "---",
        f"*{kind} information retrieved at {format_datetime(retrieved_at)}*",
        "",
        f"*To view this {kind.lower()} in Confluence, visit: {url}*",
    ]


def format_spaces_list(spaces: SpacesResponse, *, base_url: str | None = None) -> str:
    if not spaces.results:
        return NO_SPACES_MESSAGE

    base_url = spaces.links.base or base_url
    lines: list[str] = ["# Confluence Spaces", ""]

    for index, space in enumerate(spaces.results, start=1):
        lines.append(f"## {index}. {space.name}")
        lines.append(f"- **ID**: {space.id}")
        lines.append(f"- **Key**: {space.key}")
        lines.append(f"- **Type**: {space.type.value}")
        lines.append(f"- **Status**: {space.status.value}")
        if space.description and space.description.plain and space.description.plain.value:
            lines.append(f"- **Description**: {space.description.plain.value}")
        lines.append(f"- **URL**: {absolute_url(space.links.webui, base_url)}")
        lines.append("")

    if spaces.links.next:
        lines.append("*More spaces available. Please refine your search or request the next page.*")

    return "\n".join(lines)


def format_space_details(
    space: SpaceDetailed,
    *,
    base_url: str | None = None,
    retrieved_at: datetime | None = None,
) -> str:
    base_url = space.links.base or base_url
    url = absolute_url(space.links.webui, base_url)

    lines: list[str] = [f"# Confluence Space: {space.name}", ""]
    lines.append("## Basic Information")
    lines.append(f"- **ID**: {space.id}")
    lines.append(f"- **Key**: {space.key}")
    lines.append(f"- **Type**: {space.type.value}")
    lines.append(f"- **Status**: {space.status.value}")
    lines.append(f"- **Created At**: {format_datetime(space.created_at)}")
    lines.append(f"- **Author ID**: {space.author_id}")
    lines.append(f"- **Homepage ID**: {space.homepage_id or 'N/A'}")
    if space.current_active_alias:
        lines.append(f"- **Alias**: {space.current_active_alias}")

    if space.description and space.description.plain and space.description.plain.value:
        lines.extend(["", "## Description", space.description.plain.value])

    lines.extend(["", "## Links", f"- **Web UI**: {url}"])
    if space.icon and space.icon.path:
        lines.append(f"- **Icon**: {absolute_url(space.icon.path, base_url)}")

    lines.extend(["", "## Labels"])
    lines.extend(_label_lines(space.labels, "*No labels assigned to this space.*"))

    lines.extend(_footer("Space", url, retrieved_at))
    return "\n".join(lines)


def format_pages_list(pages: PagesResponse, *, base_url: str | None = None) -> str:
    if not pages.results:
        return NO_PAGES_MESSAGE

    base_url = pages.links.base or base_url
    lines: list[str] = ["# Confluence Pages", ""]

    for index, page in enumerate(pages.results, start=1):
        lines.append(f"## {index}. {page.title}")
        lines.append(f"- **ID**: {page.id}")
        lines.append(f"- **Space ID**: {page.space_id}")
        lines.append(f"- **Status**: {page.status.value}")
        if page.parent_id:
            lines.append(f"- **Parent ID**: {page.parent_id}")
        lines.append(f"- **Created At**: {format_datetime(page.created_at)}")
        if page.version:
            lines.append(f"- **Version**: {page.version.number}")
        lines.append(f"- **URL**: {absolute_url(page.links.webui, base_url)}")
        lines.append("")

    if pages.links.next:
        lines.append("*More pages available. Please refine your search or request the next page.*")

    return "\n".join(lines)


def format_page_details(
    page: PageDetailed,
    *,
    base_url: str | None = None,
    retrieved_at: datetime | None = None,
) -> str:
    base_url = page.links.base or base_url
    url = absolute_url(page.links.webui, base_url)

    lines: list[str] = [f"# Confluence Page: {page.title}", ""]
    lines.append("## Basic Information")
    lines.append(f"- **ID**: {page.id}")
    lines.append(f"- **Status**: {page.status.value}")
    lines.append(f"- **Space ID**: {page.space_id}")
    if page.parent_id:
        parent_type = page.parent_type.value if page.parent_type else "page"
        lines.append(f"- **Parent ID**: {page.parent_id} ({parent_type})")
    lines.append(f"- **Created At**: {format_datetime(page.created_at)}")
    lines.append(f"- **Author ID**: {page.author_id}")
    if page.owner_id:
        lines.append(f"- **Owner ID**: {page.owner_id}")

    if page.version:
        version = page.version
        lines.extend(["", "## Version", f"- **Number**: {version.number}"])
        lines.append(f"- **Updated At**: {format_datetime(version.created_at)}")
        lines.append(f"- **Updated By**: {version.author_id}")
        if version.message:
            lines.append(f"- **Message**: {version.message}")

    body = page.body.view if page.body and page.body.view else None
    if body is None and page.body and page.body.storage:
        body = page.body.storage
    if body is not None:
        text = html_to_text(body.value)
        lines.extend(["", "## Content", text or "*This page has no content.*"])

    lines.extend(["", "## Links", f"- **Web UI**: {url}"])
    if page.links.tinyui:
        lines.append(f"- **Short Link**: {absolute_url(page.links.tinyui, base_url)}")

    lines.extend(["", "## Labels"])
    lines.extend(_label_lines(page.labels, "*No labels assigned to this page.*"))

    lines.extend(_footer("Page", url, retrieved_at))
    return "\n".join(lines)
