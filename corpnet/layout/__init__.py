# Copyright 2026 Cisco Systems, Inc. and its affiliates
#
# SPDX-License-Identifier: Apache-2.0

"""Node extent providers for tree-layout engines."""

from .errors import ExtentError, InvalidExtentError, UnrecognizedNodeError
from .extent import (
    Extent,
    NodeExtentProvider,
    NetworkNodeExtentProvider,
    MappedNodeExtentProvider,
    UnknownNodePolicy,
)
from .topology import DeviceTypeExtentProvider, DEFAULT_DEVICE_EXTENTS
from .labels import LabelExtentProvider
from .config import ExtentSettings, ExtentStrategy, build_extent_provider

__all__ = [
    "ExtentError",
    "InvalidExtentError",
    "UnrecognizedNodeError",
    "Extent",
    "NodeExtentProvider",
    "NetworkNodeExtentProvider",
    "MappedNodeExtentProvider",
    "UnknownNodePolicy",
    "DeviceTypeExtentProvider",
    "DEFAULT_DEVICE_EXTENTS",
    "LabelExtentProvider",
    "ExtentSettings",
    "ExtentStrategy",
    "build_extent_provider",
]
