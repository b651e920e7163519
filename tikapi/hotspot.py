"""Data models of the router's hotspot servers, cookies and hosts."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Callable, ClassVar

from tikapi.types import Model, ReadOnly, ReadWrite


@dataclass
class Hotspot(Model):
    """An entry of the ``/ip/hotspot`` list."""

    api_path: ClassVar[str] = "/ip/hotspot"

    name: ReadWrite = field(default_factory=ReadWrite)
    """Hotspot server name or identifier."""
    address_pool: ReadWrite = field(default_factory=ReadWrite)
    """Address space used to give clients a valid address."""
    idle_timeout: ReadWrite = field(default_factory=ReadWrite)
    """Period of inactivity after which an unauthorized client is dropped."""
    keepalive_timeout: ReadWrite = field(default_factory=ReadWrite)
    """How long a host can be unreachable before it is removed."""
    login_timeout: ReadWrite = field(default_factory=ReadWrite)
    """How long an unauthorized host stays in the host table."""
    interface: ReadWrite = field(default_factory=ReadWrite)
    """Interface the hotspot runs on."""
    addresses_per_mac: ReadWrite = field(default_factory=ReadWrite)
    """Number of IP addresses allowed per MAC address."""
    profile: ReadWrite = field(default_factory=ReadWrite)
    """Default hotspot profile of the server."""

    def convert(self, converter: Callable[..., Any]) -> None:
        """Pass every property to ``converter(name, wrapper[, default])``."""
        super().convert(converter)

        converter("name", self.name)
        converter("address-pool", self.address_pool)
        converter("idle-timeout", self.idle_timeout, timedelta(minutes=5))
        converter("keepalive-timeout", self.keepalive_timeout)
        converter("login-timeout", self.login_timeout)
        converter("interface", self.interface)
        converter("addresses-per-mac", self.addresses_per_mac, 2)
        converter("profile", self.profile, "default")


@dataclass
class Cookie(Model):
    """An entry of the ``/ip/hotspot/cookie`` list."""

    api_path: ClassVar[str] = "/ip/hotspot/cookie"

    domain: ReadWrite = field(default_factory=ReadWrite)
    """Domain name, if split from the user name."""
    expires_in: ReadWrite = field(default_factory=ReadWrite)
    """How long the cookie stays valid."""
    mac_address: ReadWrite = field(default_factory=ReadWrite)
    """MAC address of the client."""
    user: ReadWrite = field(default_factory=ReadWrite)
    """Hotspot user name."""

    def convert(self, converter: Callable[..., Any]) -> None:
        """Pass every property to ``converter(name, wrapper)``."""
        super().convert(converter)

        converter("domain", self.domain)
        converter("expires-in", self.expires_in)
        converter("mac-address", self.mac_address)
        converter("user", self.user)


@dataclass
class Host(Model):
    """An entry of the ``/ip/hotspot/host`` list."""

    api_path: ClassVar[str] = "/ip/hotspot/host"

    mac_address: ReadOnly = field(default_factory=ReadOnly)
    """MAC address of the hotspot user."""
    address: ReadOnly = field(default_factory=ReadOnly)
    """Original IP address of the client."""
    to_address: ReadOnly = field(default_factory=ReadOnly)
    """Address assigned by the hotspot; may equal the original one."""
    server: ReadOnly = field(default_factory=ReadOnly)
    """Hotspot server the client is connected to."""
    bridge_port: ReadOnly = field(default_factory=ReadOnly)
    """Bridge port the client is connected to."""
    uptime: ReadOnly = field(default_factory=ReadOnly)
    """How long the user has been connected."""
    idle_time: ReadOnly = field(default_factory=ReadOnly)
    """How long the user has been idle."""
    idle_timeout: ReadOnly = field(default_factory=ReadOnly)
    """Idle timeout of the unauthorized client."""
    keepalive_timeout: ReadOnly = field(default_factory=ReadOnly)
    """Keepalive timeout of the unauthorized client."""
    bytes_in: ReadOnly = field(default_factory=ReadOnly)
    """Bytes received from the unauthorized client."""
    packets_in: ReadOnly = field(default_factory=ReadOnly)
    """Packets received from the unauthorized client."""
    bytes_out: ReadOnly = field(default_factory=ReadOnly)
    """Bytes sent to the unauthorized client."""
    packets_out: ReadOnly = field(default_factory=ReadOnly)
    """Packets sent to the unauthorized client."""

    def convert(self, converter: Callable[..., Any]) -> None:
        """Pass every property to ``converter(name, wrapper)``."""
        super().convert(converter)

        converter("mac-address", self.mac_address)
        converter("address", self.address)
        converter("to-address", self.to_address)
        converter("server", self.server)
        converter("bridge-port", self.bridge_port)
        converter("uptime", self.uptime)
        converter("idle-time", self.idle_time)
        converter("idle-timeout", self.idle_timeout)
        converter("keepalive-timeout", self.keepalive_timeout)
        converter("bytes-in", self.bytes_in)
        converter("packets-in", self.packets_in)
        converter("bytes-out", self.bytes_out)
        converter("packets-out", self.packets_out)