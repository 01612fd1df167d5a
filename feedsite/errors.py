from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]


class SiteError(Exception):
    """Base class for every failure that aborts a build."""

    def __init__(self, message: str, path: Optional[PathLike] = None) -> None:
        super().__init__(message)
        self.path = path


class ConfigError(SiteError):
    pass


class FilesystemError(SiteError):
    pass


class MalformedDocument(SiteError):
    def __init__(self, path: PathLike) -> None:
        super().__init__(f"{path} does not have a +++ section", path)


class InvalidMetadata(SiteError):
    def __init__(self, path: PathLike, problems: list[str]) -> None:
        self.problems = list(problems)
        detail = "; ".join(self.problems)
        super().__init__(f"Invalid frontmatter in {path}: {detail}", path)


class InvalidDate(SiteError):
    def __init__(self, path: PathLike, value: str) -> None:
        self.value = value
        super().__init__(f"Cant convert {path} date {value!r} (expected YYYY-MM-DD)", path)


class NoBlogEntries(InvalidMetadata):
    def __init__(self, path: PathLike) -> None:
        super().__init__(path, ["no blog entries found, cannot build the feeds"])


class TemplateError(SiteError):
    pass
