# Copyright © 2024 Norman Fomferra and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

import os
import unittest

import pytest

from pathsplit.splitter import POSIX_FLAVOR
from pathsplit.splitter import WINDOWS_FLAVOR
from pathsplit.splitter import get_host_flavor_name
from pathsplit.splitter import get_path_flavor


class PathFlavorTest(unittest.TestCase):
    def test_props(self):
        self.assertEqual("posix", POSIX_FLAVOR.name)
        self.assertEqual("/", POSIX_FLAVOR.sep)
        self.assertEqual("/", POSIX_FLAVOR.seps)
        self.assertEqual("windows", WINDOWS_FLAVOR.name)
        self.assertEqual("\\", WINDOWS_FLAVOR.sep)
        self.assertEqual("\\/", WINDOWS_FLAVOR.seps)
        self.assertEqual("PathFlavor('posix')", repr(POSIX_FLAVOR))

    def test_normalize(self):
        self.assertEqual("a/b\\c", POSIX_FLAVOR.normalize("a/b\\c"))
        self.assertEqual("a\\b\\c", WINDOWS_FLAVOR.normalize("a/b\\c"))
        self.assertEqual("C:\\a\\", WINDOWS_FLAVOR.normalize("C:/a/"))

    def test_posix_split_root(self):
        self.assertEqual(("", ""), POSIX_FLAVOR.split_root(""))
        self.assertEqual(("", "a/b"), POSIX_FLAVOR.split_root("a/b"))
        self.assertEqual(("/", "a/b"), POSIX_FLAVOR.split_root("/a/b"))
        self.assertEqual(("///", "a"), POSIX_FLAVOR.split_root("///a"))
        self.assertEqual(("//", ""), POSIX_FLAVOR.split_root("//"))
        self.assertEqual(("", "C:/a"), POSIX_FLAVOR.split_root("C:/a"))

    def test_windows_split_root(self):
        split_root = WINDOWS_FLAVOR.split_root
        self.assertEqual(("", ""), split_root(""))
        self.assertEqual(("", "a\\b"), split_root("a\\b"))
        self.assertEqual(("\\", "a"), split_root("\\a"))
        self.assertEqual(("C:", ""), split_root("C:"))
        self.assertEqual(("C:", "a"), split_root("C:a"))
        self.assertEqual(("C:\\", "a"), split_root("C:\\a"))
        self.assertEqual(("C:\\\\", "a\\b"), split_root("C:\\\\a\\b"))
        self.assertEqual(("\\\\srv\\share", ""), split_root("\\\\srv\\share"))
        self.assertEqual(("\\\\srv\\share\\", "a"), split_root("\\\\srv\\share\\a"))

    def test_windows_split_root_incomplete_unc(self):
        split_root = WINDOWS_FLAVOR.split_root
        self.assertEqual(("\\\\", "srv"), split_root("\\\\srv"))
        self.assertEqual(("\\\\", "srv\\\\a"), split_root("\\\\srv\\\\a"))
        self.assertEqual(("\\\\\\", "a"), split_root("\\\\\\a"))

    def test_get_path_flavor(self):
        self.assertIs(POSIX_FLAVOR, get_path_flavor("posix"))
        self.assertIs(WINDOWS_FLAVOR, get_path_flavor("windows"))
        self.assertIs(WINDOWS_FLAVOR, get_path_flavor(WINDOWS_FLAVOR))
        self.assertIs(get_path_flavor(get_host_flavor_name()), get_path_flavor())

    def test_get_host_flavor_name(self):
        expected = "windows" if os.name == "nt" else "posix"
        self.assertEqual(expected, get_host_flavor_name())

    # noinspection PyMethodMayBeStatic
    def test_get_path_flavor_fails(self):
        with pytest.raises(ValueError, match="unknown path flavor 'dos'"):
            get_path_flavor("dos")

    def test_windows_drive_letter_is_ascii(self):
        split_root = WINDOWS_FLAVOR.split_root
        self.assertEqual(("z:", "a"), split_root("z:a"))
        self.assertEqual(("", "é:\\a"), split_root("é:\\a"))
        self.assertEqual(("", "1:\\a"), split_root("1:\\a"))
        self.assertEqual(("", ":\\a"), split_root(":\\a"))
