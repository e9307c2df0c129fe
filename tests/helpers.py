# Copyright © 2024 Norman Fomferra and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

import fsspec

# (path, directory name, last component or None if the path is invalid)
POSIX_CASES = [
    ("", ".", None),
    ("file", ".", "file"),
    ("a/b", "a", "b"),
    ("a/b/", "a", "b"),
    ("/", "/", "/"),
    ("a//b", "a", "b"),
    ("/a", "/", "a"),
    ("a/", ".", "a"),
    ("//", "//", "//"),
    ("///", "///", "///"),
    ("/a/b/c", "/a/b", "c"),
    ("/a/b/c///", "/a/b", "c"),
    ("a///b///", "a", "b"),
    ("//a", "//", "a"),
    ("//a//b", "//a", "b"),
    (".", ".", "."),
    ("./a", ".", "a"),
    ("..", ".", ".."),
    ("../a", "..", "a"),
    ("a\\b", ".", "a\\b"),
    ("a/b\\c", "a", "b\\c"),
    (" a/ b", " a", " b"),
    ("ä/ö/ü.txt", "ä/ö", "ü.txt"),
]

WINDOWS_CASES = [
    ("", ".", None),
    ("file", ".", "file"),
    ("a/b", "a", "b"),
    ("a\\b\\", "a", "b"),
    ("a/b\\c", "a\\b", "c"),
    ("a//b", "a", "b"),
    ("\\", "\\", "\\"),
    ("/", "\\", "\\"),
    ("\\a", "\\", "a"),
    ("C:\\a\\b", "C:\\a", "b"),
    ("C:/a/b/", "C:\\a", "b"),
    ("C:\\a", "C:\\", "a"),
    ("C:\\", "C:\\", "C:\\"),
    ("C:/", "C:\\", "C:\\"),
    ("C:", "C:", "C:"),
    ("C:a", "C:", "a"),
    ("C:a\\b", "C:a", "b"),
    ("\\\\srv\\share\\a", "\\\\srv\\share\\", "a"),
    ("//srv/share/a/b", "\\\\srv\\share\\a", "b"),
    ("\\\\srv\\share", "\\\\srv\\share", "\\\\srv\\share"),
    ("\\\\srv\\share\\", "\\\\srv\\share\\", "\\\\srv\\share\\"),
]


def clear_memory_fs():
    fs = fsspec.filesystem("memory")
    fs.rm("/", recursive=True)
