# Copyright © 2024 Norman Fomferra and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

from .api import Config
from .api import FileObj
from .api import InvalidPath
from .api import PathSplitter
from .api import directory_name
from .api import last_component
from .api import split_path

__version__ = "0.1.0"

__all__ = [
    "Config",
    "FileObj",
    "InvalidPath",
    "PathSplitter",
    "directory_name",
    "last_component",
    "split_path",
    "__version__",
]
