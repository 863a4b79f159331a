# Copyright 2026 Cisco Systems, Inc. and its affiliates
#
# SPDX-License-Identifier: Apache-2.0

"""Network topology model consumed by the extent providers."""

from .graph import NetworkGraph, DeviceType

__all__ = ["NetworkGraph", "DeviceType"]
