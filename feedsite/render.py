from __future__ import annotations

import shutil
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import jinja2
from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from .errors import FilesystemError, TemplateError
from .utils import list_files


def load_template(path: Path) -> jinja2.Template:
    """Compile the site template.

    Undefined variables raise instead of rendering as empty strings, so a
    template has to guard optional fields with ``is defined``. Autoescaping is
    on for ``.html`` templates; rendered markdown is emitted with ``|safe``.
    """
    env = Environment(
        loader=FileSystemLoader(str(path.parent)),
        autoescape=select_autoescape(["html", "htm"]),
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )
    try:
        return env.get_template(path.name)
    except jinja2.TemplateNotFound as exc:
        raise TemplateError(f"cant read {path}", path) from exc
    except jinja2.TemplateError as exc:
        raise TemplateError(f"cant make template {path}: {exc}", path) from exc


def render_template(template: jinja2.Template, data: Mapping[str, Any], target: Path) -> str:
    try:
        return template.render(dict(data))
    except jinja2.TemplateError as exc:
        raise TemplateError(f"Cant render {target}: {exc}", target) from exc


def write_text(path: Path, text: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise FilesystemError(f"Cant write to file {path}: {exc}", path) from exc


def render_to_file(template: jinja2.Template, data: Mapping[str, Any], path: Path) -> None:
    write_text(path, render_template(template, data, path))


def copy_static(static_dir: Path, output_dir: Path) -> None:
    # files only, empty folders under static/ are not recreated
    for item in list_files(static_dir):
        dest = output_dir / item.relative_to(static_dir)
        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(item, dest)
        except OSError as exc:
            raise FilesystemError(f"failed to copy {item} to {dest}: {exc}", item) from exc
