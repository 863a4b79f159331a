# Copyright 2026 Cisco Systems, Inc. and its affiliates
#
# SPDX-License-Identifier: Apache-2.0

"""Exceptions raised by node extent providers."""

from typing import Any


class ExtentError(Exception):
    """Base class for extent provider errors."""


class InvalidExtentError(ExtentError, ValueError):
    """Raised when a provider is configured with an unusable extent."""


class UnrecognizedNodeError(ExtentError, KeyError):
    """Raised when a provider is asked about a node it does not know."""

    def __init__(self, node: Any):
        super().__init__(node)
        self.node = node

    def __str__(self) -> str:
        return f"Unrecognized layout node: {self.node!r}"
