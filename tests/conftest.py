"""Shared fixtures: a throwaway site tree and ready-made blog entries"""

from pathlib import Path, PurePosixPath

import pytest

from feedsite.blogs import BlogEntry
from feedsite.config import SiteConfig
from feedsite.content import FrontmatterTable, require_blog_fields


CONFIG_TOML = """\
name = "Ada"
home_page = "https://ada.example.com"
icon = "https://ada.example.com/icon.png"
"""

TEMPLATE = """\
<title>{{ title }}</title>
{% if blogs is defined %}
{% for blog in blogs %}<a href="blogs/{{ blog.path }}">{{ blog.config.title }}</a>
{% endfor %}before={{ before }} after={{ after }}
{% else %}<main>{{ content|safe }}</main>
{% endif %}
"""


@pytest.fixture
def site_config():
    return SiteConfig(
        name="Ada",
        home_page_url="https://ada.example.com",
        icon_url="https://ada.example.com/icon.png",
    )


@pytest.fixture
def site(tmp_path) -> Path:
    """A source root with a config and a template, but no content yet."""
    root = tmp_path / "site"
    root.mkdir()
    (root / "config.toml").write_text(CONFIG_TOML, encoding="utf-8")
    (root / "template.html").write_text(TEMPLATE, encoding="utf-8")
    return root


@pytest.fixture
def write_doc():
    """Write a +++ document below ``root`` and return its path."""
    def _write(root: Path, rel: str, frontmatter: str, body: str = "Body text.\n") -> Path:
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"+++\n{frontmatter}\n+++\n{body}", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_post(write_doc):
    """Write a blog post with the two required keys."""
    def _write(root: Path, name: str, title: str, date: str, body: str = "Body text.\n") -> Path:
        return write_doc(root, f"blogs/{name}", f'title = "{title}"\ndate = "{date}"', body)

    return _write


@pytest.fixture
def make_entry():
    def _make(name: str, date: str, title: str = "") -> BlogEntry:
        table = FrontmatterTable({"title": title or name, "date": date})
        table.set_content(f"<p>{name}</p>")
        return BlogEntry(
            metadata=table,
            relative_path=PurePosixPath(name).with_suffix(".html"),
            meta=require_blog_fields(table, name),
        )

    return _make
