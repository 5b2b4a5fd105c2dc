"""Upload local directory trees to a bucket and download objects to disk."""

import logging
import os
from collections.abc import Callable
from pathlib import Path

from .accessor import ObjectAccessor
from .content_types import ContentTypeMap
from .exceptions import LocalIOError
from .keys import key_for_path, path_for_key

log = logging.getLogger(__name__)

ContentTypePolicy = Callable[[str], str | None]


class DirectorySynchronizer:
    """Moves files between a local tree and a flat key namespace.

    Transfers are strictly sequential. The first failure aborts the current
    operation; objects already written stay written.
    """

    def __init__(
        self,
        accessor: ObjectAccessor,
        content_type_for: ContentTypePolicy | None = None,
    ):
        self._accessor = accessor
        self._content_type_for = content_type_for or ContentTypeMap().resolve

    def upload_directory(self, prefix: str, root: str | os.PathLike) -> list[str]:
        """Upload every regular file under *root* to keys under *prefix*.

        Returns the uploaded keys in upload order.
        """
        files = list_files(root)
        log.info(
            "Uploading %d files from %s to s3://%s/%s",
            len(files),
            root,
            self._accessor.bucket,
            prefix,
        )

        keys: list[str] = []
        for path in files:
            keys.append(self.upload_file(prefix, root, path))

        log.info("Uploaded %d files from %s", len(keys), root)
        return keys

    def upload_file(self, prefix: str, root: str | os.PathLike, path: str | os.PathLike) -> str:
        """Upload one file located under *root* and return its key."""
        key = key_for_path(prefix, root, path)
        content_type = self._content_type_for(os.fspath(path))
        try:
            with open(path, "rb") as fh:
                return self._accessor.write(key, fh, content_type=content_type)
        except OSError as e:
            raise LocalIOError(f"Cannot read {path}: {e}", path=os.fspath(path), key=key, cause=e) from e

    def download_file(self, key: str, dest_root: str | os.PathLike) -> Path:
        """Download *key* to ``dest_root/<last key segment>`` and return that path.

        Read failures, a missing key included, propagate unchanged.
        """
        dest = path_for_key(dest_root, key)
        obj = self._accessor.get(key)
        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
            dest.write_bytes(obj.content)
        except OSError as e:
            raise LocalIOError(f"Cannot write {dest}: {e}", path=str(dest), key=key, cause=e) from e
        log.debug("Downloaded s3://%s/%s -> %s", self._accessor.bucket, key, dest)
        return dest


def list_files(root: str | os.PathLike) -> list[Path]:
    """Return the regular files under *root*, recursively, in lexical walk order.

    Directories are descended into but never returned. Symlinks to
    directories are not followed.
    """
    files: list[Path] = []
    try:
        _collect(Path(root), files)
    except OSError as e:
        failed = os.fspath(e.filename or root)
        raise LocalIOError(f"Cannot walk {failed}: {e}", path=failed, cause=e) from e
    return files


def _collect(directory: Path, files: list[Path]) -> None:
    with os.scandir(directory) as it:
        entries = sorted(it, key=lambda entry: entry.name)
    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            _collect(Path(entry.path), files)
        elif entry.is_file():
            files.append(Path(entry.path))
