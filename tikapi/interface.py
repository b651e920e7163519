"""Data model of the router's network interface list."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar

from tikapi.types import Model, ReadOnly, ReadWrite

_EMPTY = ""


@dataclass
class Interface(Model):
    """An entry of the ``/interface`` list."""

    api_path: ClassVar[str] = "/interface"

    l2mtu: ReadWrite = field(default_factory=ReadWrite)
    """Layer 2 maximum transmission unit; not configurable on every interface."""
    mtu: ReadWrite = field(default_factory=ReadWrite)
    """Layer 3 maximum transmission unit."""
    name: ReadWrite = field(default_factory=ReadWrite)
    """Name of the interface."""
    is_dynamic: ReadOnly = field(default_factory=ReadOnly)
    """Whether the interface was created dynamically."""
    fast_path: ReadOnly = field(default_factory=ReadOnly)
    """Whether fast path is active."""
    if_id: ReadOnly = field(default_factory=ReadOnly)
    """Interface id."""
    if_index: ReadOnly = field(default_factory=ReadOnly)
    """Interface index."""
    if_name: ReadOnly = field(default_factory=ReadOnly)
    """Interface name in the kernel."""
    mac_address: ReadOnly = field(default_factory=ReadOnly)
    """MAC address of the interface."""
    max_l2mtu: ReadOnly = field(default_factory=ReadOnly)
    """Largest supported layer 2 MTU."""
    is_running: ReadOnly = field(default_factory=ReadOnly)
    """Whether the interface is running."""
    rx_byte: ReadOnly = field(default_factory=ReadOnly)
    """Number of received bytes."""
    rx_drop: ReadOnly = field(default_factory=ReadOnly)
    """Number of received packets that were dropped."""
    rx_errors: ReadOnly = field(default_factory=ReadOnly)
    """Packets received with some kind of error."""
    rx_packet: ReadOnly = field(default_factory=ReadOnly)
    """Number of received packets."""
    is_slave: ReadOnly = field(default_factory=ReadOnly)
    """Whether the interface is a slave of another interface."""
    status: ReadOnly = field(default_factory=ReadOnly)
    """The interface status."""
    tx_byte: ReadOnly = field(default_factory=ReadOnly)
    """Number of transmitted bytes."""
    tx_drop: ReadOnly = field(default_factory=ReadOnly)
    """Number of transmitted packets that were dropped."""
    tx_errors: ReadOnly = field(default_factory=ReadOnly)
    """Packets transmitted with some kind of error."""
    tx_packet: ReadOnly = field(default_factory=ReadOnly)
    """Number of transmitted packets."""

    def convert(self, converter: Callable[..., Any]) -> None:
        """Pass every property to ``converter(name, wrapper[, default])``."""
        super().convert(converter)

        converter("l2mtu", self.l2mtu, _EMPTY)
        converter("mtu", self.mtu, _EMPTY)
        converter("name", self.name, _EMPTY)
        converter("dynamic", self.is_dynamic)
        converter("fast-path", self.fast_path)
        converter("id", self.if_id)
        converter("ifindex", self.if_index)
        converter("ifname", self.if_name)
        converter("mac-address", self.mac_address)
        converter("max-l2mtu", self.max_l2mtu)
        converter("running", self.is_running)
        converter("rx-byte", self.rx_byte)
        converter("rx-drop", self.rx_drop)
        converter("rx-errors", self.rx_errors)
        converter("rx-packet", self.rx_packet)
        converter("slave", self.is_slave)
        converter("status", self.status)
        converter("tx-byte", self.tx_byte)
        converter("tx-drop", self.tx_drop)
        converter("tx-errors", self.tx_errors)
        converter("tx-packet", self.tx_packet)