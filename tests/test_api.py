# Copyright © 2024 Norman Fomferra and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

import os
import unittest

import pytest

import pathsplit
from pathsplit import InvalidPath
from pathsplit import directory_name
from pathsplit import last_component
from pathsplit import split_path
from pathsplit.api import get_default_splitter
from pathsplit.splitter import get_path_flavor


class ApiTest(unittest.TestCase):
    def test_version(self):
        self.assertIsInstance(pathsplit.__version__, str)

    def test_default_splitter(self):
        splitter = get_default_splitter()
        self.assertIs(splitter, get_default_splitter())
        self.assertIs(get_path_flavor(), splitter.flavor)

    def test_dirname_of_empty_path(self):
        self.assertEqual(".", directory_name(""))

    def test_dirname_of_bare_filename(self):
        self.assertEqual(".", directory_name("file"))
        self.assertEqual("file", last_component("file"))

    # noinspection PyMethodMayBeStatic
    def test_last_component_of_empty_path(self):
        with pytest.raises(InvalidPath):
            last_component("")

    @unittest.skipIf(os.name == "nt", reason="POSIX host only")
    def test_posix_host(self):
        self.assertEqual("a", directory_name("a/b"))
        self.assertEqual("a", directory_name("a/b/"))
        self.assertEqual("/", directory_name("/"))
        self.assertEqual("a", directory_name("a//b"))
        self.assertEqual("/", directory_name("/a"))
        self.assertEqual("b", last_component("a/b/"))
        self.assertEqual("/", last_component("/"))
        self.assertEqual(("/a", "b"), split_path("/a/b"))

    @unittest.skipIf(os.name != "nt", reason="Windows host only")
    def test_windows_host(self):
        self.assertEqual("a", directory_name("a/b"))
        self.assertEqual("C:\\", directory_name("C:/a"))
        self.assertEqual("\\", directory_name("/"))
        self.assertEqual(("C:\\a", "b"), split_path("C:\\a\\b"))
