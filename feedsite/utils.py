from __future__ import annotations

import datetime as dt
import shutil
from email.utils import format_datetime
from pathlib import Path

from .errors import FilesystemError


def join_url(base: str, path: str) -> str:
    base = base.rstrip("/")
    path = path.lstrip("/")
    if not path:
        return base
    return f"{base}/{path}"


def rfc822_date(value: dt.date) -> str:
    # "%a, %d %b %Y 00:00:00 +0000", independent of the process locale
    midnight = dt.datetime.combine(value, dt.time(), tzinfo=dt.timezone.utc)
    return format_datetime(midnight)


def iso_date(value: str) -> str:
    return f"{value}T00:00:00+00:00"


def list_files(root: Path, recursive: bool = True) -> list[Path]:
    if not root.is_dir():
        return []
    paths = root.rglob("*") if recursive else root.iterdir()
    return sorted((path for path in paths if path.is_file()), key=lambda p: p.as_posix())


def prepare_output_dir(output_dir: Path, project_root: Path) -> None:
    """Leave ``output_dir`` existing and empty, whatever was there before."""
    output_resolved = output_dir.resolve()
    root_resolved = project_root.resolve()
    if root_resolved.is_relative_to(output_resolved):
        raise FilesystemError(f"Refusing to clean {output_dir}: it contains the project root.", output_dir)
    try:
        shutil.rmtree(output_dir)
    except FileNotFoundError:
        pass
    except OSError as exc:
        raise FilesystemError(f"could not remove the folder {output_dir}: {exc}", output_dir) from exc
    make_dir(output_dir, parents=True)


def make_dir(path: Path, parents: bool = False, exist_ok: bool = False) -> None:
    try:
        path.mkdir(parents=parents, exist_ok=exist_ok)
    except OSError as exc:
        raise FilesystemError(f'could not make the folder "{path}": {exc}', path) from exc
