# Copyright © 2024 Norman Fomferra and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

from typing import Any, Literal

import fsspec

from ..splitter.flavor import POSIX_FLAVOR
from ..splitter.reference import ReferenceBoundaryFinder

# fsspec paths always use "/", whatever the host
_finder = ReferenceBoundaryFinder(POSIX_FLAVOR)


class FileObj:
    """A file given by a local path or an fsspec URI.

    The filesystem is created lazily, on first access of
    [fs][pathsplit.fsutil.fileobj.FileObj.fs],
    [path][pathsplit.fsutil.fileobj.FileObj.path] or
    [read()][pathsplit.fsutil.fileobj.FileObj.read].

    Args:
        uri: The file path or URI
        storage_options: Optional storage options specific to
            the protocol of the URI
    """

    def __init__(self, uri: str, storage_options: dict[str, Any] | None = None):
        self._uri = uri
        self._storage_options = storage_options
        self._fs: fsspec.AbstractFileSystem | None = None
        self._path: str | None = None

    def __str__(self):
        return self._uri

    def __repr__(self):
        return f"FileObj({self._uri!r})"

    @property
    def uri(self) -> str:
        """The URI."""
        return self._uri

    @property
    def fs(self) -> fsspec.AbstractFileSystem:
        """The filesystem."""
        self._resolve()
        return self._fs

    @property
    def path(self) -> str:
        """The path of the file into the filesystem."""
        self._resolve()
        return self._path

    @property
    def filename(self) -> str:
        """The last component of the URI's path.
        Chained URIs such as `"zip://a.txt::memory://b.zip"` address
        the file in their first link. Empty if the URI has no path.
        """
        first_uri = self._uri.split("::", maxsplit=1)[0]
        _, path = fsspec.core.split_protocol(first_uri)
        return _finder.last_component(path) if path else ""

    def read(self, mode: Literal["rb"] | Literal["r"] = "rb") -> bytes | str:
        """Read the contents of the file.

        Args:
            mode: Read mode, must be "rb" or "r"

        Returns:
            The contents of the file either as `bytes` if mode is "rb" or as `str`
            if mode is "r".
        """
        self._resolve()
        with self._fs.open(self._path, mode=mode) as f:
            return f.read()

    def _resolve(self):
        if self._fs is None:
            self._fs, self._path = fsspec.core.url_to_fs(
                self._uri, **(self._storage_options or {})
            )
