"""Data models of the router's hotspot users and user profiles."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Callable, ClassVar

from tikapi.types import Model, ReadOnly, ReadWrite

_EMPTY = ""
_NO_BYTES = 0
_NO_TIME = timedelta(0)


@dataclass
class User(Model):
    """An entry of the ``/ip/hotspot/user`` list."""

    api_path: ClassVar[str] = "/ip/hotspot/user"

    address: ReadWrite = field(default_factory=ReadWrite)
    """IP address the client gets through one-to-one NAT."""
    comment: ReadWrite = field(default_factory=ReadWrite)
    """Descriptive information about the user."""
    email: ReadWrite = field(default_factory=ReadWrite)
    """Informational e-mail address of the user."""
    limit_bytes_in: ReadWrite = field(default_factory=ReadWrite)
    """Bytes that may be received from the user before disconnection."""
    limit_bytes_out: ReadWrite = field(default_factory=ReadWrite)
    """Bytes that may be sent by the user before disconnection."""
    limit_bytes_total: ReadWrite = field(default_factory=ReadWrite)
    """Combined in and out byte limit."""
    limit_uptime: ReadWrite = field(default_factory=ReadWrite)
    """Uptime after which the user is disconnected."""
    mac_address: ReadWrite = field(default_factory=ReadWrite)
    """MAC address the user may log in from; all zeros allows any."""
    name: ReadWrite = field(default_factory=ReadWrite)
    """Login name of the user."""
    password: ReadWrite = field(default_factory=ReadWrite)
    """The user's password."""
    profile: ReadWrite = field(default_factory=ReadWrite)
    """User profile the user belongs to."""
    routes: ReadWrite = field(default_factory=ReadWrite)
    """Routes added to the gateway while the user is connected."""
    server: ReadWrite = field(default_factory=ReadWrite)
    """Hotspot server the user may log in to."""
    bytes_in: ReadOnly = field(default_factory=ReadOnly)
    """Bytes received by the user."""
    bytes_out: ReadOnly = field(default_factory=ReadOnly)
    """Bytes sent by the user."""
    packets_in: ReadOnly = field(default_factory=ReadOnly)
    """Packets received by the user."""
    packets_out: ReadOnly = field(default_factory=ReadOnly)
    """Packets sent by the user."""
    uptime: ReadOnly = field(default_factory=ReadOnly)
    """Time the user has spent online."""

    def convert(self, converter: Callable[..., Any]) -> None:
        """Pass every property to ``converter(name, wrapper[, default])``."""
        super().convert(converter)

        converter("address", self.address, "0.0.0.0")
        converter("comment", self.comment, _EMPTY)
        converter("email", self.email, _EMPTY)
        converter("limit-bytes-in", self.limit_bytes_in, _NO_BYTES)
        converter("limit-bytes-out", self.limit_bytes_out, _NO_BYTES)
        converter("limit-bytes-total", self.limit_bytes_total, _NO_BYTES)
        converter("limit-uptime", self.limit_uptime, _NO_TIME)
        converter("mac-address", self.mac_address, "00:00:00:00:00:00")
        converter("name", self.name, _EMPTY)
        converter("password", self.password, _EMPTY)
        converter("profile", self.profile, "default")
        converter("routes", self.routes, _EMPTY)
        converter("server", self.server, "all")
        converter("bytes-in", self.bytes_in)
        converter("bytes-out", self.bytes_out)
        converter("packets-in", self.packets_in)
        converter("packets-out", self.packets_out)
        converter("uptime", self.uptime)


@dataclass
class UserProfile(Model):
    """An entry of the ``/ip/hotspot/user/profile`` list."""

    api_path: ClassVar[str] = "/ip/hotspot/user/profile"

    address_list: ReadWrite = field(default_factory=ReadWrite)
    """Address list the user's IP address is added to."""
    address_pool: ReadWrite = field(default_factory=ReadWrite)
    """IP pool the user gets an address from."""
    advertise: ReadWrite = field(default_factory=ReadWrite)
    """Whether forced advertisement popups are enabled."""
    advertise_interval: ReadWrite = field(default_factory=ReadWrite)
    """Intervals between advertisement popups."""
    advertise_timeout: ReadWrite = field(default_factory=ReadWrite)
    """How long an advertisement is shown before access is blocked."""
    advertise_url: ReadWrite = field(default_factory=ReadWrite)
    """URLs shown in advertisement popups."""
    idle_timeout: ReadWrite = field(default_factory=ReadWrite)
    """Maximal inactivity of an authorized client."""
    incoming_filter: ReadWrite = field(default_factory=ReadWrite)
    """Firewall chain applied to packets from the users."""
    incoming_packet_mark: ReadWrite = field(default_factory=ReadWrite)
    """Packet mark put on packets from the users."""
    keepalive_timeout: ReadWrite = field(default_factory=ReadWrite)
    """Keepalive timeout of authorized clients."""
    name: ReadWrite = field(default_factory=ReadWrite)
    """Descriptive name of the profile."""
    on_login: ReadWrite = field(default_factory=ReadWrite)
    """Script run when a user logs in."""
    on_logout: ReadWrite = field(default_factory=ReadWrite)
    """Script run when a user logs out."""
    open_status_page: ReadWrite = field(default_factory=ReadWrite)
    """When to show the status page to MAC-authenticated users."""
    outgoing_filter: ReadWrite = field(default_factory=ReadWrite)
    """Firewall chain applied to packets to the users."""
    outgoing_packet_mark: ReadWrite = field(default_factory=ReadWrite)
    """Packet mark put on packets to the users."""
    rate_limit: ReadWrite = field(default_factory=ReadWrite)
    """Rate limit of the dynamic queue created for each user."""
    session_timeout: ReadWrite = field(default_factory=ReadWrite)
    """Session time after which the user is logged out."""
    shared_users: ReadWrite = field(default_factory=ReadWrite)
    """Number of simultaneous logins allowed with the same user name."""
    status_autorefresh: ReadWrite = field(default_factory=ReadWrite)
    """Refresh interval of the status page."""
    transparent_proxy: ReadWrite = field(default_factory=ReadWrite)
    """Whether a transparent HTTP proxy is used for the users."""

    def convert(self, converter: Callable[..., Any]) -> None:
        """Pass every property to ``converter(name, wrapper[, default])``."""
        super().convert(converter)

        converter("address-list", self.address_list, _EMPTY)
        converter("address-pool", self.address_pool)
        converter("advertise", self.advertise, False)
        converter("advertise-interval", self.advertise_interval, "30m,10m")
        converter("advertise-timeout", self.advertise_timeout, "1m")
        converter("advertise-url", self.advertise_url, _EMPTY)
        converter("idle-timeout", self.idle_timeout)
        converter("incoming-filter", self.incoming_filter, _EMPTY)
        converter("incoming-packet-mark", self.incoming_packet_mark, _EMPTY)
        converter("keepalive-timeout", self.keepalive_timeout, _EMPTY)
        converter("name", self.name, _EMPTY)
        converter("on-login", self.on_login, _EMPTY)
        converter("on-logout", self.on_logout, _EMPTY)
        converter("open-status-page", self.open_status_page, "always")
        converter("outgoing-filter", self.outgoing_filter, _EMPTY)
        converter("outgoing-packet-mark", self.outgoing_packet_mark, _EMPTY)
        converter("rate-limit", self.rate_limit, _EMPTY)
        converter("shared-users", self.shared_users, 1)
        converter("session-timeout", self.session_timeout, _NO_TIME)
        converter("status-autorefresh", self.status_autorefresh)
        converter("transparent-proxy", self.transparent_proxy, True)