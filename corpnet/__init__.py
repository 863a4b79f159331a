# Copyright 2026 Cisco Systems, Inc. and its affiliates
#
# SPDX-License-Identifier: Apache-2.0

"""
corpnet: node sizing for network topology tree layouts

Extent providers tell an external tree-layout engine how much space each
device node occupies, independently of how the tree is laid out or drawn.
"""

from .layout.extent import (
    Extent,
    NodeExtentProvider,
    NetworkNodeExtentProvider,
    MappedNodeExtentProvider,
    UnknownNodePolicy,
)
from .network.graph import NetworkGraph, DeviceType

__version__ = "0.1.0"
__all__ = [
    "Extent",
    "NodeExtentProvider",
    "NetworkNodeExtentProvider",
    "MappedNodeExtentProvider",
    "UnknownNodePolicy",
    "NetworkGraph",
    "DeviceType",
]
