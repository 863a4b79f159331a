# Copyright 2026 Cisco Systems, Inc. and its affiliates
#
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for DeviceTypeExtentProvider."""

import pytest

from corpnet.network.graph import NetworkGraph, DeviceType
from corpnet.layout import (
    DEFAULT_DEVICE_EXTENTS,
    DeviceTypeExtentProvider,
    Extent,
    InvalidExtentError,
    UnknownNodePolicy,
    UnrecognizedNodeError,
)


class TestDeviceTypeExtentProvider:
    """Test cases for device-type driven extents."""

    def setup_method(self):
        """Build a small core/access topology."""
        self.network = NetworkGraph()
        self.network.add_device("core", DeviceType.ROUTER)
        self.network.add_device("fw", DeviceType.FIREWALL)
        self.network.add_device("access", DeviceType.SWITCH)
        self.network.add_device("pc1", DeviceType.HOST)
        self.network.add_connection("core", "fw")
        self.network.add_connection("fw", "access")
        self.network.add_connection("access", "pc1")

    def test_default_sizes(self):
        """Without explicit sizes each type gets its default extent."""
        provider = DeviceTypeExtentProvider.from_network(self.network)
        assert provider.extent("core") == DEFAULT_DEVICE_EXTENTS[DeviceType.ROUTER]
        assert provider.extent("pc1") == DEFAULT_DEVICE_EXTENTS[DeviceType.HOST]
        assert provider.width("core") > provider.width("pc1")

    def test_custom_sizes(self):
        sizes = {t: (10, 10) for t in DeviceType}
        sizes[DeviceType.SWITCH] = (200, 20)
        provider = DeviceTypeExtentProvider.from_network(self.network, sizes=sizes)
        assert provider.width("access") == 200
        assert provider.height("access") == 20
        assert provider.extent("core") == Extent(10, 10)

    def test_missing_type_size_rejected(self):
        """A device whose type has no configured extent fails at construction."""
        with pytest.raises(InvalidExtentError, match="host"):
            DeviceTypeExtentProvider.from_network(
                self.network, sizes={DeviceType.ROUTER: (1, 1),
                                     DeviceType.FIREWALL: (1, 1),
                                     DeviceType.SWITCH: (1, 1)}
            )

    def test_network_changes_do_not_leak(self):
        """The provider keeps the device types seen at construction."""
        provider = DeviceTypeExtentProvider.from_network(self.network)
        self.network.add_device("pc2", DeviceType.HOST)
        assert "pc2" not in provider
        with pytest.raises(UnrecognizedNodeError):
            provider.width("pc2")

    def test_unknown_device_default_policy(self):
        provider = DeviceTypeExtentProvider.from_network(
            self.network, default=(50, 50), on_unknown=UnknownNodePolicy.DEFAULT
        )
        assert provider.extent("unknown") == Extent(50, 50)

    def test_explicit_mapping(self):
        provider = DeviceTypeExtentProvider({"a": "server", "b": DeviceType.HOST})
        assert provider.extent("a") == DEFAULT_DEVICE_EXTENTS[DeviceType.SERVER]
        assert provider.sizes[DeviceType.HOST] == Extent(60, 40)

    def test_unknown_type_in_sizes_rejected(self):
        """A size keyed by a name that is not a device type is a setup error."""
        sizes = dict(DEFAULT_DEVICE_EXTENTS)
        sizes["mainframe"] = (300, 100)
        with pytest.raises(InvalidExtentError, match="mainframe"):
            DeviceTypeExtentProvider.from_network(self.network, sizes=sizes)

    def test_unknown_device_type_rejected(self):
        with pytest.raises(InvalidExtentError, match="printer"):
            DeviceTypeExtentProvider({"p1": "printer"})
