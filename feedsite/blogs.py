"""Blog pipeline: collect posts, order them by date, paginate, emit.

Every post is rendered to ``blogs/<name>.html`` as soon as it is parsed;
ordering only matters for the index pages and the feeds, which are built from
the sorted collection afterwards. The feeds carry the first index page only.
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Optional

import jinja2

from .config import SiteConfig
from .content import BlogMeta, FrontmatterTable, load_document, require_blog_fields
from .errors import NoBlogEntries
from .feeds import write_feeds
from .pages import BLOG_DIR_NAME, build_blog_index, build_post
from .utils import list_files, make_dir

PAGE_SIZE = 10
BLOG_PAGE_TITLE = "Blogs"


@dataclass(frozen=True)
class BlogEntry:
    metadata: FrontmatterTable
    relative_path: PurePosixPath
    meta: BlogMeta


@dataclass(frozen=True)
class BlogPage:
    title: str
    entries: tuple[BlogEntry, ...]
    previous_index: Optional[int] = None
    next_index: Optional[int] = None


@dataclass
class BlogBuild:
    entries: list[BlogEntry] = field(default_factory=list)
    pages: list[BlogPage] = field(default_factory=list)
    written: list[Path] = field(default_factory=list)


def post_output_name(source: Path) -> PurePosixPath:
    return PurePosixPath(source.name).with_suffix(".html")


def sort_entries(entries: Sequence[BlogEntry]) -> list[BlogEntry]:
    # sorted() is stable: posts sharing a date keep their discovery order
    return sorted(entries, key=lambda entry: entry.meta.published)


def paginate(entries: Sequence[BlogEntry], page_size: int = PAGE_SIZE) -> list[BlogPage]:
    """Split sorted entries into index pages of at most ``page_size``.

    ``next_index`` is set while the page index is below
    ``len(entries) // page_size``. With an exact multiple of ``page_size``
    the last page still points at one more page, which is never written.
    """
    last_linked = len(entries) // page_size
    pages = []
    for index, start in enumerate(range(0, len(entries), page_size)):
        pages.append(
            BlogPage(
                title=BLOG_PAGE_TITLE,
                entries=tuple(entries[start : start + page_size]),
                previous_index=index - 1 if index > 0 else None,
                next_index=index + 1 if index < last_linked else None,
            )
        )
    return pages


def build_blogs(
    blogs_dir: Path, output_dir: Path, template: jinja2.Template, config: SiteConfig
) -> Optional[BlogBuild]:
    if not blogs_dir.is_dir():
        return None
    blog_output_dir = output_dir / BLOG_DIR_NAME
    make_dir(blog_output_dir)

    result = BlogBuild()
    rendered = []
    for source in list_files(blogs_dir, recursive=False):
        table = load_document(source)
        rel = post_output_name(source)
        result.written.append(build_post(table, blog_output_dir / rel, template))
        rendered.append((source, table, rel))

    entries = [
        BlogEntry(metadata=table, relative_path=rel, meta=require_blog_fields(table, str(source)))
        for source, table, rel in rendered
    ]
    result.entries = sort_entries(entries)
    result.pages = paginate(result.entries)
    if not result.pages:
        raise NoBlogEntries(blogs_dir)

    result.written.extend(build_blog_index(result.pages, output_dir, template))
    result.written.extend(write_feeds(output_dir, config, result.pages[0].entries))
    return result
