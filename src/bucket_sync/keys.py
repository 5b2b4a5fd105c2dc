"""Mapping between local filesystem paths and object keys."""

import os
from pathlib import Path


def key_for_path(prefix: str, root: str | os.PathLike, path: str | os.PathLike) -> str:
    """Return the object key for *path*, a file located under *root*.

    The path relative to *root* is computed segment by segment on the
    absolute, normalized forms of both paths, then joined onto *prefix* with
    ``/``. An empty prefix yields the bare relative path.

    Raises:
        ValueError: If *path* is not strictly inside *root*.
    """
    abs_root = Path(os.path.abspath(root))
    abs_path = Path(os.path.abspath(path))
    try:
        relative = abs_path.relative_to(abs_root)
    except ValueError:
        raise ValueError(f"{path} is not located under {root}") from None
    if not relative.parts:
        raise ValueError(f"{path} is the root directory itself, not a file under it")

    relative_key = "/".join(relative.parts)
    prefix = prefix.strip("/")
    return f"{prefix}/{relative_key}" if prefix else relative_key


def path_for_key(dest_root: str | os.PathLike, key: str) -> Path:
    """Return where *key* is downloaded under *dest_root*.

    Only the last segment of the key is used, so ``a/b/c.txt`` lands at
    ``dest_root/c.txt``.
    """
    name = key.rsplit("/", 1)[-1]
    if name in ("", ".", ".."):
        raise ValueError(f"Key {key!r} has no file name segment")
    return Path(dest_root) / name
