# Copyright 2026 Cisco Systems, Inc. and its affiliates
#
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for MappedNodeExtentProvider."""

import logging

import pytest

from corpnet.layout import (
    Extent,
    InvalidExtentError,
    MappedNodeExtentProvider,
    UnknownNodePolicy,
    UnrecognizedNodeError,
)


class TestMappedNodeExtentProvider:
    """Test cases for the mapping-backed extent provider."""

    def setup_method(self):
        """Create a provider for two known nodes."""
        self.source = {"core": (120, 60), "host": Extent(60, 40)}
        self.provider = MappedNodeExtentProvider(self.source)

    def test_known_nodes(self):
        """Known nodes get their own extent."""
        assert self.provider.width("core") == 120
        assert self.provider.height("core") == 60
        assert self.provider.extent("host") == Extent(60, 40)
        assert "core" in self.provider
        assert len(self.provider) == 2

    def test_mapping_is_snapshotted(self):
        """Changing the source mapping does not affect the provider."""
        self.source["core"] = (1, 1)
        self.source["new"] = (5, 5)
        assert self.provider.width("core") == 120
        assert "new" not in self.provider

    def test_extents_view_is_read_only(self):
        with pytest.raises(TypeError):
            self.provider.extents["core"] = Extent(1, 1)

    def test_unknown_node_raises_by_default(self, caplog):
        """The default policy fails fast on unknown nodes."""
        assert self.provider.on_unknown is UnknownNodePolicy.RAISE
        with caplog.at_level(logging.WARNING):
            with pytest.raises(UnrecognizedNodeError) as excinfo:
                self.provider.width("missing")
        assert excinfo.value.node == "missing"
        assert "missing" in str(excinfo.value)
        assert "no extent for node" in caplog.text

    def test_unrecognized_node_is_key_error(self):
        with pytest.raises(KeyError):
            self.provider.height("missing")

    def test_unhashable_node_is_unknown(self):
        assert ["core"] not in self.provider
        with pytest.raises(UnrecognizedNodeError):
            self.provider.width(["core"])

    def test_default_policy_returns_default(self):
        """The DEFAULT policy answers unknown nodes with the default extent."""
        provider = MappedNodeExtentProvider(
            self.source, default=(100, 30), on_unknown=UnknownNodePolicy.DEFAULT
        )
        assert provider.extent("missing") == Extent(100, 30)
        assert provider.width("core") == 120

    def test_policy_accepts_string(self):
        provider = MappedNodeExtentProvider(self.source, default=(1, 1), on_unknown="default")
        assert provider.on_unknown is UnknownNodePolicy.DEFAULT

    def test_policy_name_is_case_insensitive(self):
        provider = MappedNodeExtentProvider(self.source, default=(1, 1), on_unknown="DEFAULT")
        assert provider.on_unknown is UnknownNodePolicy.DEFAULT

    def test_unknown_policy_name_rejected(self):
        with pytest.raises(InvalidExtentError, match="raise, default"):
            MappedNodeExtentProvider(self.source, on_unknown="sometimes")

    def test_default_policy_requires_default(self):
        with pytest.raises(InvalidExtentError):
            MappedNodeExtentProvider(self.source, on_unknown=UnknownNodePolicy.DEFAULT)

    def test_invalid_extent_rejected(self):
        with pytest.raises(InvalidExtentError):
            MappedNodeExtentProvider({"bad": (-1, 10)})

    def test_empty_mapping(self):
        provider = MappedNodeExtentProvider({}, default=(0, 0), on_unknown="default")
        assert len(provider) == 0
        assert provider.extent("x") == Extent(0, 0)
