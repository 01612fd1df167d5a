from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import jinja2

from .content import FrontmatterTable, load_document
from .render import render_to_file
from .utils import list_files

if TYPE_CHECKING:
    from .blogs import BlogPage

BLOG_DIR_NAME = "blogs"


def build_pages(pages_dir: Path, output_dir: Path, template: jinja2.Template) -> list[Path]:
    written = []
    for source in list_files(pages_dir):
        rel = source.relative_to(pages_dir)
        table = load_document(source)
        dest = (output_dir / rel).with_suffix(".html")
        render_to_file(template, table, dest)
        written.append(dest)
    return written


def build_post(table: FrontmatterTable, dest: Path, template: jinja2.Template) -> Path:
    render_to_file(template, table, dest)
    return dest


def blog_page_name(index: int) -> str:
    return f"{BLOG_DIR_NAME}-{index}.html"


def blog_page_context(page: BlogPage) -> dict:
    return {
        "title": page.title,
        "blogs": [
            {"config": entry.metadata.to_dict(), "path": entry.relative_path.as_posix()}
            for entry in page.entries
        ],
        "before": page.previous_index,
        "after": page.next_index,
    }


def build_blog_index(pages: list[BlogPage], output_dir: Path, template: jinja2.Template) -> list[Path]:
    written = []
    for index, page in enumerate(pages):
        dest = output_dir / blog_page_name(index)
        render_to_file(template, blog_page_context(page), dest)
        written.append(dest)
    return written
