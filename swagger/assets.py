"""
Descriptor for the static Swagger UI bundle (swagger-ui.css, swagger-ui-bundle.js, ...).

Handlers never mutate a descriptor: each one derives its own copy carrying the
prefix it serves under, so one descriptor can back any number of handlers.
"""
import os
from typing import Optional, Union

from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel, ConfigDict


class StaticAssets(BaseModel):
    model_config = ConfigDict(frozen=True)

    directory: Optional[str] = None
    packages: Optional[list[Union[str, tuple[str, str]]]] = None
    # Stripped from request paths before the file lookup.
    prefix: str = ""
    check_dir: bool = True
    follow_symlink: bool = False

    def with_prefix(self, prefix: str) -> "StaticAssets":
        return self.model_copy(update={"prefix": prefix})

    def files(self) -> StaticFiles:
        return StaticFiles(
            directory=self.directory,
            packages=self.packages,
            check_dir=self.check_dir,
            follow_symlink=self.follow_symlink,
        )


def asset_path(path: str, prefix: str) -> Optional[str]:
    """
    Turn a request path into a path relative to the bundle root.
    Returns None when a non-empty prefix doesn't match.
    """
    if prefix:
        if not path.startswith(prefix):
            return None
        path = path[len(prefix):]
    return os.path.normpath(os.path.join(*path.split("/")))
