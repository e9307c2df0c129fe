# Copyright © 2024 Norman Fomferra and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

from ..splitter.flavor import get_host_flavor_name

DEFAULT_FLAVOR = get_host_flavor_name()
DEFAULT_STRATEGY = "native"
