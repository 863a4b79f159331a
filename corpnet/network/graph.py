# Copyright 2026 Cisco Systems, Inc. and its affiliates
#
# SPDX-License-Identifier: Apache-2.0

"""
Network graph representation using NetworkX.

This module provides the NetworkGraph class that holds the devices of a
topology diagram and the connections between them. Extent providers read
device attributes (type, label) from it when they are constructed.
"""

import networkx as nx
from typing import Dict, List, Tuple, Optional, Any
from enum import Enum


class DeviceType(Enum):
    """Network device types."""
    ROUTER = "router"
    SWITCH = "switch"
    SERVER = "server"
    FIREWALL = "firewall"
    HOST = "host"


class NetworkGraph:
    """
    Network topology backed by a NetworkX directed graph.

    Nodes represent network devices with attributes:
    - device_type: DeviceType enum
    - label: text shown on the diagram (defaults to the device ID)
    - ip_address: IP address string

    Edges represent connections with attributes:
    - bandwidth: bandwidth in Mbps
    - latency: latency in milliseconds
    """

    def __init__(self):
        """Initialize empty network graph."""
        self.graph = nx.DiGraph()
        self._ip_counter = 1

    def add_device(self, device_id: str, device_type: DeviceType,
                   label: Optional[str] = None,
                   ip_address: Optional[str] = None) -> None:
        """
        Add a network device to the graph.

        Args:
            device_id: Unique identifier for the device
            device_type: Type of network device
            label: Diagram label (device ID if None)
            ip_address: IP address (auto-generated if None)
        """
        device_type = DeviceType(device_type)
        if ip_address is None:
            ip_address = f"192.168.1.{self._ip_counter}"
            self._ip_counter += 1

        self.graph.add_node(device_id,
                            device_type=device_type,
                            label=device_id if label is None else label,
                            ip_address=ip_address)

    def add_connection(self, source: str, destination: str,
                       bandwidth: float = 100.0, latency: float = 1.0,
                       bidirectional: bool = True) -> None:
        """
        Add a connection between two existing devices.

        Args:
            source: Source device ID
            destination: Destination device ID
            bandwidth: Connection bandwidth in Mbps
            latency: Connection latency in milliseconds
            bidirectional: If True, add connection in both directions
        """
        for device_id in (source, destination):
            if device_id not in self.graph.nodes:
                raise ValueError(f"Device {device_id} not found")

        edge_attrs = {
            'bandwidth': bandwidth,
            'latency': latency
        }

        self.graph.add_edge(source, destination, **edge_attrs)

        if bidirectional:
            self.graph.add_edge(destination, source, **edge_attrs)

    def get_device_info(self, device_id: str) -> Dict[str, Any]:
        """Get device information."""
        if device_id not in self.graph.nodes:
            raise ValueError(f"Device {device_id} not found")
        return dict(self.graph.nodes[device_id])

    def get_all_devices(self) -> List[str]:
        """Get list of all device IDs."""
        return list(self.graph.nodes())

    def get_all_connections(self) -> List[Tuple[str, str]]:
        """Get list of all connections as (source, destination) tuples."""
        return list(self.graph.edges())

    def device_types(self) -> Dict[str, DeviceType]:
        """Map every device ID to its device type."""
        return dict(nx.get_node_attributes(self.graph, 'device_type'))

    def device_labels(self) -> Dict[str, str]:
        """Map every device ID to its diagram label."""
        return dict(nx.get_node_attributes(self.graph, 'label'))

    def copy(self) -> 'NetworkGraph':
        """Create a deep copy of the network graph."""
        new_graph = NetworkGraph()
        new_graph.graph = self.graph.copy()
        new_graph._ip_counter = self._ip_counter
        return new_graph

    def __len__(self) -> int:
        """Return number of devices in the network."""
        return len(self.graph.nodes())

    def __contains__(self, device_id: str) -> bool:
        """Check if device exists in the network."""
        return device_id in self.graph.nodes()
