from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .blogs import BlogBuild, build_blogs
from .config import load_config
from .errors import SiteError
from .pages import build_pages
from .render import copy_static, load_template
from .utils import prepare_output_dir


@dataclass
class BuildReport:
    output_dir: Path
    pages: list[Path] = field(default_factory=list)
    blogs: Optional[BlogBuild] = None


def resolve_path(root: Path, value: str) -> Path:
    path = Path(value)
    if path.is_absolute():
        return path
    return root / path


def build_site(args: argparse.Namespace) -> BuildReport:
    project_root = Path(args.source)
    output_dir = resolve_path(project_root, args.output)

    # the output root is wiped before anything is read, a failed run leaves it partial
    prepare_output_dir(output_dir, project_root)
    config = load_config(resolve_path(project_root, args.config))
    copy_static(project_root / "static", output_dir)
    template = load_template(resolve_path(project_root, args.template))

    report = BuildReport(output_dir=output_dir)
    report.pages = build_pages(project_root / "pages", output_dir, template)
    report.blogs = build_blogs(project_root / "blogs", output_dir, template, config)
    return report


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Static site generator for +++ frontmatter markdown.")
    parser.add_argument(
        "--source",
        default=".",
        help="Site root holding static/, pages/, blogs/, the config and the template.",
    )
    parser.add_argument("--config", default="config.toml", help="Site config file (TOML/YAML/JSON).")
    parser.add_argument("--template", default="template.html", help="Jinja2 template for every page.")
    parser.add_argument("--output", default="public", help="Output directory, recreated on every run.")
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> None:
    args = parse_args(argv)
    start = time.perf_counter()
    try:
        report = build_site(args)
    except SiteError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)
    elapsed = time.perf_counter() - start
    print(f"Rendered {len(report.pages)} pages.")
    if report.blogs is None:
        print("No blogs directory, skipped the blog.")
    else:
        print(f"Rendered {len(report.blogs.entries)} blog entries on {len(report.blogs.pages)} pages.")
    print(f"Build completed in {elapsed:.2f}s.")
    print(f"Site generated in: {report.output_dir}")
