# Copyright 2026 Cisco Systems, Inc. and its affiliates
#
# SPDX-License-Identifier: Apache-2.0

"""
Extent providers driven by network topology attributes.

Device types are read once, when the provider is built, so a layout in
progress never observes later edits to the network.
"""

import logging
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple, Union

from ..network.graph import NetworkGraph, DeviceType
from .errors import InvalidExtentError
from .extent import Extent, MappedNodeExtentProvider, UnknownNodePolicy

LOGGER = logging.getLogger(__name__)

ExtentLike = Union[Extent, Tuple[float, float]]

DEFAULT_DEVICE_EXTENTS: Mapping[DeviceType, Extent] = MappingProxyType({
    DeviceType.ROUTER: Extent(120.0, 60.0),
    DeviceType.FIREWALL: Extent(120.0, 60.0),
    DeviceType.SWITCH: Extent(100.0, 40.0),
    DeviceType.SERVER: Extent(80.0, 60.0),
    DeviceType.HOST: Extent(60.0, 40.0),
})


def _device_type(value, context: str) -> DeviceType:
    try:
        return DeviceType(value)
    except ValueError:
        raise InvalidExtentError(f"Unknown device type {value!r} ({context})") from None


class DeviceTypeExtentProvider(MappedNodeExtentProvider):
    """Sizes each device node by its device type."""

    def __init__(self, device_types: Mapping[str, DeviceType],
                 sizes: Optional[Mapping[DeviceType, ExtentLike]] = None,
                 default: Optional[ExtentLike] = None,
                 on_unknown: UnknownNodePolicy = UnknownNodePolicy.RAISE):
        """
        Initialize the provider.

        Args:
            device_types: Device type of each device ID
            sizes: Extent per device type (DEFAULT_DEVICE_EXTENTS if None)
            default: Extent for unknown devices under the DEFAULT policy
            on_unknown: Policy for device IDs missing from ``device_types``
        """
        if sizes is None:
            sizes = DEFAULT_DEVICE_EXTENTS
        type_extents = {_device_type(t, "sizes"): Extent.of(e) for t, e in sizes.items()}

        extents: Dict[str, Extent] = {}
        for device_id, device_type in device_types.items():
            device_type = _device_type(device_type, f"device {device_id}")
            if device_type not in type_extents:
                raise InvalidExtentError(
                    f"No extent configured for device type '{device_type.value}' "
                    f"(device {device_id})"
                )
            extents[device_id] = type_extents[device_type]

        self._sizes = MappingProxyType(type_extents)
        super().__init__(extents, default=default, on_unknown=on_unknown)

    @property
    def sizes(self) -> Mapping[DeviceType, Extent]:
        return self._sizes

    @classmethod
    def from_network(cls, network: NetworkGraph,
                     sizes: Optional[Mapping[DeviceType, ExtentLike]] = None,
                     default: Optional[ExtentLike] = None,
                     on_unknown: UnknownNodePolicy = UnknownNodePolicy.RAISE
                     ) -> 'DeviceTypeExtentProvider':
        """Build a provider from the devices currently in ``network``."""
        LOGGER.debug("Snapshotting device types of %d devices", len(network))
        return cls(network.device_types(), sizes=sizes, default=default,
                   on_unknown=on_unknown)
