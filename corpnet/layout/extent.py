# Copyright 2026 Cisco Systems, Inc. and its affiliates
#
# SPDX-License-Identifier: Apache-2.0

"""
Node extent contract for tree-layout engines.

A tree-layout engine computes node positions from the tree shape alone and
asks a NodeExtentProvider how large each node is. Providers answer
synchronously, hold no per-node mutable state, and can be queried
concurrently from any number of threads.
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from numbers import Complex, Number, Real
from types import MappingProxyType
from typing import Any, Hashable, Mapping, Optional, Tuple, Union

from .errors import InvalidExtentError, UnrecognizedNodeError

LOGGER = logging.getLogger(__name__)

# Layout nodes are opaque handles owned by the layout engine.
LayoutNode = Hashable


def validate_dimension(name: str, value: Any) -> float:
    """Return ``value`` as a float, rejecting negative or non-finite numbers."""
    if (isinstance(value, bool) or not isinstance(value, Number)
            or (isinstance(value, Complex) and not isinstance(value, Real))):
        raise InvalidExtentError(f"{name} must be a real number, got {value!r}")
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidExtentError(f"{name} must be a real number, got {value!r}") from None
    if not math.isfinite(value):
        raise InvalidExtentError(f"{name} must be finite, got {value!r}")
    if value < 0:
        raise InvalidExtentError(f"{name} must be non-negative, got {value!r}")
    return value


@dataclass(frozen=True)
class Extent:
    """Width and height of a node, in layout units."""

    width: float
    height: float

    def __post_init__(self):
        object.__setattr__(self, "width", validate_dimension("width", self.width))
        object.__setattr__(self, "height", validate_dimension("height", self.height))

    @classmethod
    def of(cls, value: Union["Extent", Tuple[float, float]]) -> "Extent":
        """Coerce an Extent or a ``(width, height)`` pair into an Extent."""
        if isinstance(value, cls):
            return value
        try:
            width, height = value
        except (TypeError, ValueError):
            raise InvalidExtentError(
                f"Expected an Extent or a (width, height) pair, got {value!r}"
            ) from None
        return cls(width, height)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.width, self.height)


class UnknownNodePolicy(Enum):
    """What a variable-extent provider does with a node it does not know."""
    RAISE = "raise"
    DEFAULT = "default"

    @classmethod
    def parse(cls, value: Union["UnknownNodePolicy", str]) -> "UnknownNodePolicy":
        """Accept a policy or its case-insensitive name."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            allowed = ", ".join(member.value for member in cls)
            raise InvalidExtentError(
                f"Unknown node policy must be one of: {allowed}; got {value!r}"
            ) from None


class NodeExtentProvider(ABC):
    """
    Strategy that tells a layout engine how much space a node occupies.

    Implementations must return the same answer for the same node every
    time they are asked, and must not depend on shared mutable layout state.
    """

    @abstractmethod
    def width(self, node: LayoutNode) -> float:
        """Return the non-negative width of ``node``."""

    @abstractmethod
    def height(self, node: LayoutNode) -> float:
        """Return the non-negative height of ``node``."""

    def extent(self, node: LayoutNode) -> Extent:
        """Return both dimensions of ``node`` as an Extent."""
        return Extent(self.width(node), self.height(node))


class NetworkNodeExtentProvider(NodeExtentProvider):
    """
    Uniform extent provider: every node has the same width and height.

    The node handle is never inspected, so any object is accepted.
    """

    def __init__(self, width: float, height: float):
        """
        Initialize the provider.

        Args:
            width: Width shared by all nodes, in layout units
            height: Height shared by all nodes, in layout units

        Raises:
            InvalidExtentError: If either value is negative or not a finite number
        """
        self._width = validate_dimension("width", width)
        self._height = validate_dimension("height", height)
        LOGGER.debug("Uniform node extent configured: %sx%s", self._width, self._height)

    @property
    def default_width(self) -> float:
        return self._width

    @property
    def default_height(self) -> float:
        return self._height

    def width(self, node: LayoutNode) -> float:
        return self._width

    def height(self, node: LayoutNode) -> float:
        return self._height

    def __repr__(self) -> str:
        return f"NetworkNodeExtentProvider(width={self._width}, height={self._height})"


class MappedNodeExtentProvider(NodeExtentProvider):
    """
    Variable extent provider backed by a fixed node-to-extent mapping.

    The mapping is copied at construction, so later changes to the source
    mapping do not leak into a layout in progress.
    """

    def __init__(self, extents: Mapping[LayoutNode, Union[Extent, Tuple[float, float]]],
                 default: Optional[Union[Extent, Tuple[float, float]]] = None,
                 on_unknown: UnknownNodePolicy = UnknownNodePolicy.RAISE):
        """
        Initialize the provider.

        Args:
            extents: Extent (or ``(width, height)`` pair) for each known node
            default: Extent returned for unknown nodes under the DEFAULT policy
            on_unknown: Policy applied to nodes missing from ``extents``

        Raises:
            InvalidExtentError: If an extent is invalid, or the DEFAULT policy
                is requested without a default extent
        """
        on_unknown = UnknownNodePolicy.parse(on_unknown)
        if on_unknown is UnknownNodePolicy.DEFAULT and default is None:
            raise InvalidExtentError("UnknownNodePolicy.DEFAULT requires a default extent")

        self._extents = MappingProxyType(
            {node: Extent.of(value) for node, value in extents.items()}
        )
        self._default = Extent.of(default) if default is not None else None
        self._on_unknown = on_unknown
        LOGGER.debug(
            "%s configured with %d node extents (on_unknown=%s)",
            type(self).__name__, len(self._extents), on_unknown.value,
        )

    @property
    def extents(self) -> Mapping[LayoutNode, Extent]:
        """Read-only view of the known node extents."""
        return self._extents

    @property
    def default(self) -> Optional[Extent]:
        return self._default

    @property
    def on_unknown(self) -> UnknownNodePolicy:
        return self._on_unknown

    def extent(self, node: LayoutNode) -> Extent:
        try:
            return self._extents[node]
        except (KeyError, TypeError):
            # TypeError: unhashable handles cannot be known nodes
            pass

        if self._on_unknown is UnknownNodePolicy.RAISE:
            LOGGER.warning("%s has no extent for node %r", type(self).__name__, node)
            raise UnrecognizedNodeError(node)

        LOGGER.debug("Using default extent for unknown node %r", node)
        return self._default

    def width(self, node: LayoutNode) -> float:
        return self.extent(node).width

    def height(self, node: LayoutNode) -> float:
        return self.extent(node).height

    def __contains__(self, node: LayoutNode) -> bool:
        try:
            return node in self._extents
        except TypeError:
            return False

    def __len__(self) -> int:
        return len(self._extents)
