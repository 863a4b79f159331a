# Copyright 2026 Cisco Systems, Inc. and its affiliates
#
# SPDX-License-Identifier: Apache-2.0

"""Extent provider configuration.

Settings can be given explicitly or read from the environment:
- CORPNET_LAYOUT_NODE_WIDTH: default node width (120)
- CORPNET_LAYOUT_NODE_HEIGHT: default node height (40)
- CORPNET_LAYOUT_EXTENT_STRATEGY: uniform | device_type | label
- CORPNET_LAYOUT_UNKNOWN_NODE_POLICY: raise | default
- CORPNET_LAYOUT_LABEL_FONT_SIZE: bold label font size in points (8)
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional
import logging
import os

from ..network.graph import NetworkGraph
from .errors import InvalidExtentError
from .extent import Extent, NodeExtentProvider, NetworkNodeExtentProvider, UnknownNodePolicy
from .labels import DEFAULT_LABEL_FONT_SIZE, LabelExtentProvider
from .topology import DeviceTypeExtentProvider

LOGGER = logging.getLogger(__name__)

ENV_PREFIX = "CORPNET_LAYOUT_"


class ExtentStrategy(Enum):
    """Available extent provider strategies."""
    UNIFORM = "uniform"
    DEVICE_TYPE = "device_type"
    LABEL = "label"


@dataclass(frozen=True)
class ExtentSettings:
    default_width: float = 120.0
    default_height: float = 40.0
    strategy: ExtentStrategy = ExtentStrategy.UNIFORM
    on_unknown: UnknownNodePolicy = UnknownNodePolicy.RAISE
    font_size: float = DEFAULT_LABEL_FONT_SIZE

    @property
    def default_extent(self) -> Extent:
        return Extent(self.default_width, self.default_height)

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX) -> "ExtentSettings":
        """Read settings from environment variables, keeping defaults for unset ones."""
        defaults = cls()
        return cls(
            default_width=_env_float(prefix + "NODE_WIDTH", defaults.default_width),
            default_height=_env_float(prefix + "NODE_HEIGHT", defaults.default_height),
            strategy=_env_enum(prefix + "EXTENT_STRATEGY", ExtentStrategy, defaults.strategy),
            on_unknown=_env_enum(prefix + "UNKNOWN_NODE_POLICY", UnknownNodePolicy,
                                 defaults.on_unknown),
            font_size=_env_float(prefix + "LABEL_FONT_SIZE", defaults.font_size),
        )


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise InvalidExtentError(f"{name} must be a number, got {raw!r}") from None


def _env_enum(name: str, enum_cls, default):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return enum_cls(raw.strip().lower())
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise InvalidExtentError(f"{name} must be one of: {allowed}; got {raw!r}") from None


def build_extent_provider(settings: Optional[ExtentSettings] = None,
                          network: Optional[NetworkGraph] = None) -> NodeExtentProvider:
    """
    Build the extent provider described by ``settings``.

    Args:
        settings: Provider settings (read from the environment if None)
        network: Topology to size; required by the device_type and label strategies

    Returns:
        A ready-to-use NodeExtentProvider
    """
    if settings is None:
        settings = ExtentSettings.from_env()
    try:
        strategy = ExtentStrategy(settings.strategy)
    except ValueError:
        raise InvalidExtentError(f"Unknown extent strategy {settings.strategy!r}") from None
    LOGGER.info("Building %s extent provider", strategy.value)

    if strategy is ExtentStrategy.UNIFORM:
        return NetworkNodeExtentProvider(settings.default_width, settings.default_height)

    if network is None:
        raise ValueError(f"The {strategy.value} extent strategy requires a network")

    if strategy is ExtentStrategy.DEVICE_TYPE:
        return DeviceTypeExtentProvider.from_network(
            network,
            default=settings.default_extent,
            on_unknown=settings.on_unknown,
        )

    return LabelExtentProvider.from_network(
        network,
        font_size=settings.font_size,
        min_extent=settings.default_extent,
        default=settings.default_extent,
        on_unknown=settings.on_unknown,
    )
