# Copyright 2026 Cisco Systems, Inc. and its affiliates
#
# SPDX-License-Identifier: Apache-2.0

"""
Extent provider sized by the rendered size of each node's label.

Labels are measured with matplotlib text paths when the provider is built;
queries afterwards are plain lookups.
"""

import logging
import math
from typing import Dict, Mapping, Optional, Tuple

from matplotlib.font_manager import FontProperties
from matplotlib.textpath import TextPath

from ..network.graph import NetworkGraph
from .extent import (
    Extent, MappedNodeExtentProvider, UnknownNodePolicy, validate_dimension,
)
from .errors import InvalidExtentError
from .topology import ExtentLike

LOGGER = logging.getLogger(__name__)


DEFAULT_LABEL_FONT_SIZE = 8.0


def default_label_font() -> FontProperties:
    """Bold font used for device labels on topology diagrams."""
    return FontProperties(weight="bold")


def measure_text(text: str, font_size: float = DEFAULT_LABEL_FONT_SIZE,
                 font: Optional[FontProperties] = None) -> Tuple[float, float]:
    """
    Measure the ink extent of ``text`` in points.

    Dollar signs are measured as literal characters, never as math markup.

    Args:
        text: Text to measure
        font_size: Font size in points
        font: Font to use (bold label font if None)

    Returns:
        (width, height) of the text; (0.0, 0.0) for text with no glyphs
    """
    if not text:
        return 0.0, 0.0
    if font is None:
        font = default_label_font()
    literal = text.replace("$", r"\$")
    bbox = TextPath((0, 0), literal, size=font_size, prop=font).get_extents()
    width, height = bbox.width, bbox.height
    if not (math.isfinite(width) and math.isfinite(height)):
        # Whitespace has no outline, so its bounding box is empty.
        return 0.0, 0.0
    return max(width, 0.0), max(height, 0.0)


class LabelExtentProvider(MappedNodeExtentProvider):
    """Sizes each node to fit its label plus padding."""

    def __init__(self, labels: Mapping[str, str],
                 font_size: float = DEFAULT_LABEL_FONT_SIZE,
                 padding: Tuple[float, float] = (8.0, 4.0),
                 min_extent: Optional[ExtentLike] = None,
                 font: Optional[FontProperties] = None,
                 default: Optional[ExtentLike] = None,
                 on_unknown: UnknownNodePolicy = UnknownNodePolicy.RAISE):
        """
        Initialize the provider.

        Args:
            labels: Label text of each node
            font_size: Font size in points, must be positive
            padding: Horizontal and vertical padding added on each side
            min_extent: Smallest extent any node may have
            font: Font used for measuring (bold label font if None)
            default: Extent for unknown nodes under the DEFAULT policy
            on_unknown: Policy for nodes missing from ``labels``
        """
        font_size = validate_dimension("font_size", font_size)
        if font_size == 0:
            raise InvalidExtentError("font_size must be positive")
        pad_x, pad_y = Extent.of(padding).as_tuple()
        floor = Extent.of(min_extent) if min_extent is not None else Extent(0.0, 0.0)

        extents: Dict[str, Extent] = {}
        for node, label in labels.items():
            text_width, text_height = measure_text(str(label), font_size, font)
            extents[node] = Extent(
                max(text_width + 2 * pad_x, floor.width),
                max(text_height + 2 * pad_y, floor.height),
            )

        self._font_size = font_size
        self._padding = (pad_x, pad_y)
        super().__init__(extents, default=default, on_unknown=on_unknown)

    @property
    def font_size(self) -> float:
        return self._font_size

    @property
    def padding(self) -> Tuple[float, float]:
        return self._padding

    @classmethod
    def from_network(cls, network: NetworkGraph, **kwargs) -> 'LabelExtentProvider':
        """Build a provider from the labels of the devices in ``network``."""
        labels = network.device_labels()
        LOGGER.debug("Measuring %d device labels", len(labels))
        return cls(labels, **kwargs)
