from __future__ import annotations

import datetime as dt
from collections.abc import Iterator, MutableMapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import markdown
from pymdownx import emoji

try:
    import tomllib as toml
except ImportError:
    import tomli as toml

from .errors import FilesystemError, InvalidDate, InvalidMetadata, MalformedDocument

FRONT_MATTER_MARKER = "+++"
CONTENT_KEY = "content"
DATE_FMT = "%Y-%m-%d"

MARKDOWN_EXTENSIONS = ["pymdownx.tilde", "pymdownx.emoji"]
MARKDOWN_EXTENSION_CONFIGS = {
    # only ~~strikethrough~~, single tildes stay literal
    "pymdownx.tilde": {"subscript": False},
    "pymdownx.emoji": {"emoji_index": emoji.gemoji, "emoji_generator": emoji.to_alt},
}


class FrontmatterTable(MutableMapping):
    """Ordered frontmatter values of one document.

    The ``content`` key always holds the rendered body and belongs to the
    engine: a ``content`` value written in the source is dropped, and the only
    way to set it is :meth:`set_content`.
    """

    def __init__(self, values: dict | None = None) -> None:
        self._data: dict[str, Any] = {}
        for key, value in (values or {}).items():
            if key != CONTENT_KEY:
                self._data[key] = value

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        if key == CONTENT_KEY:
            raise ValueError("'content' is set by the renderer, use set_content()")
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"FrontmatterTable({self._data!r})"

    @property
    def content(self) -> str:
        return self._data.get(CONTENT_KEY, "")

    def set_content(self, html: str) -> None:
        self._data.pop(CONTENT_KEY, None)
        self._data[CONTENT_KEY] = html

    def to_dict(self) -> dict[str, Any]:
        return dict(self._data)


@dataclass(frozen=True)
class BlogMeta:
    title: str
    date: str
    published: dt.date


def parse_front_matter(raw: str, source_name: str) -> tuple[FrontmatterTable, str]:
    parts = raw.lstrip("\ufeff").split(FRONT_MATTER_MARKER, 2)
    if len(parts) < 3:
        raise MalformedDocument(source_name)
    _, meta_block, body = parts
    try:
        values = toml.loads(meta_block)
    except toml.TOMLDecodeError as exc:
        raise InvalidMetadata(source_name, [str(exc)]) from exc
    return FrontmatterTable(values), body


def render_markdown(text: str) -> str:
    md = markdown.Markdown(
        extensions=MARKDOWN_EXTENSIONS,
        extension_configs=MARKDOWN_EXTENSION_CONFIGS,
    )
    return md.convert(text)


def build_document(table: FrontmatterTable, body: str) -> FrontmatterTable:
    table.set_content(render_markdown(body))
    return table


def read_source(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FilesystemError(f"Cant read file {path}: {exc}", path) from exc


def load_document(path: Path, source_name: str | None = None) -> FrontmatterTable:
    name = source_name or str(path)
    table, body = parse_front_matter(read_source(path), name)
    return build_document(table, body)


def parse_date(value: str) -> dt.date:
    return dt.datetime.strptime(value, DATE_FMT).date()


def require_blog_fields(table: FrontmatterTable, source_name: str) -> BlogMeta:
    """Check the keys every blog entry needs and return them typed.

    All shape problems are reported together; the date is only parsed once
    the shape is right.
    """
    problems = []
    title = table.get("title")
    if title is None:
        problems.append("missing 'title'")
    elif not isinstance(title, str):
        problems.append("'title' must be a string")
    date_value = table.get("date")
    if date_value is None:
        problems.append("missing 'date'")
    elif not isinstance(date_value, str):
        problems.append("'date' must be a quoted \"YYYY-MM-DD\" string")
    if problems:
        raise InvalidMetadata(source_name, problems)
    try:
        published = parse_date(date_value)
    except ValueError as exc:
        raise InvalidDate(source_name, date_value) from exc
    return BlogMeta(title=title, date=date_value, published=published)
