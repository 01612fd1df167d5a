from __future__ import annotations

import html
import json
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from .config import SiteConfig
from .render import write_text
from .utils import iso_date, join_url, rfc822_date

if TYPE_CHECKING:
    from .blogs import BlogEntry

JSON_FEED_VERSION = "https://jsonfeed.org/version/1"
JSON_FEED_NAME = "blogs.json"
RSS_FEED_NAME = "blogs.rss"


def entry_url(config: SiteConfig, entry: BlogEntry) -> str:
    return join_url(config.home_page_url, f"blogs/{entry.relative_path.as_posix()}")


def build_json_feed(config: SiteConfig, entries: Sequence[BlogEntry]) -> dict:
    items = []
    for entry in entries:
        url = entry_url(config, entry)
        items.append(
            {
                "id": url,
                "url": url,
                "title": entry.meta.title,
                "content_html": entry.metadata.content,
                "date_published": iso_date(entry.meta.date),
            }
        )
    return {
        "version": JSON_FEED_VERSION,
        "title": config.blog_title,
        "items": items,
        "icon": config.icon_url,
        "home_page_url": config.home_page_url,
        "feed_url": join_url(config.home_page_url, JSON_FEED_NAME),
    }


def build_rss(config: SiteConfig, entries: Sequence[BlogEntry]) -> str:
    items = []
    for entry in entries:
        link = entry_url(config, entry)
        items.append(
            "\n".join(
                [
                    "<item>",
                    f"<title>{html.escape(entry.meta.title)}</title>",
                    f"<link>{html.escape(link)}</link>",
                    f"<description>{html.escape(entry.metadata.content)}</description>",
                    f'<guid isPermaLink="true">{html.escape(link)}</guid>',
                    f"<pubDate>{rfc822_date(entry.meta.published)}</pubDate>",
                    "</item>",
                ]
            )
        )
    return "\n".join(
        [
            '<?xml version="1.0" encoding="UTF-8"?>',
            '<rss version="2.0">',
            "<channel>",
            f"<title>{html.escape(config.blog_title)}</title>",
            f"<link>{html.escape(join_url(config.home_page_url, 'blogs'))}</link>",
            "<description></description>",
            *items,
            "</channel>",
            "</rss>",
        ]
    )


def write_feeds(output_dir: Path, config: SiteConfig, entries: Sequence[BlogEntry]) -> tuple[Path, Path]:
    json_path = output_dir / JSON_FEED_NAME
    rss_path = output_dir / RSS_FEED_NAME
    feed = build_json_feed(config, entries)
    write_text(json_path, json.dumps(feed, indent=2, ensure_ascii=False))
    write_text(rss_path, build_rss(config, entries))
    return json_path, rss_path
