from datetime import timedelta

import pytest

from tikapi.hotspot_user import User, UserProfile
from tikapi.types import ReadOnly, ReadWrite

_NO_DEFAULT = object()


class _Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, name, wrapper, default=_NO_DEFAULT):
        self.calls.append((name, wrapper, default))

    @property
    def names(self):
        return [name for name, _, _ in self.calls]

    def default_of(self, name):
        for key, _, default in self.calls:
            if key == name:
                return default
        raise KeyError(name)

    def wrapper_of(self, name):
        for key, wrapper, _ in self.calls:
            if key == name:
                return wrapper
        raise KeyError(name)


def _apply_defaults(name, wrapper, default=_NO_DEFAULT):
    if default is not _NO_DEFAULT:
        wrapper.value = default


def _record(model):
    recorder = _Recorder()
    model.convert(recorder)
    return recorder


def test_user_property_order():
    user = User()
    names = _record(user).names
    assert user.api_path == "/ip/hotspot/user"
    assert names[0] == ".id"
    assert names[1:] == [
        "address", "comment", "email", "limit-bytes-in", "limit-bytes-out",
        "limit-bytes-total", "limit-uptime", "mac-address", "name", "password",
        "profile", "routes", "server", "bytes-in", "bytes-out", "packets-in",
        "packets-out", "uptime",
    ]


@pytest.mark.parametrize(
    "name, expected",
    [
        ("address", "0.0.0.0"),
        ("comment", ""),
        ("email", ""),
        ("limit-bytes-in", 0),
        ("limit-bytes-total", 0),
        ("limit-uptime", timedelta(0)),
        ("mac-address", "00:00:00:00:00:00"),
        ("profile", "default"),
        ("server", "all"),
    ],
)
def test_user_defaults(name, expected):
    assert _record(User()).default_of(name) == expected


@pytest.mark.parametrize("name", ["bytes-in", "bytes-out", "packets-in", "uptime"])
def test_user_statistics_have_no_default(name):
    assert _record(User()).default_of(name) is _NO_DEFAULT


def test_user_passes_own_wrappers():
    user = User()
    recorder = _record(user)
    assert recorder.wrapper_of("mac-address") is user.mac_address
    assert recorder.wrapper_of("uptime") is user.uptime
    assert recorder.wrapper_of(".id") is user.id


def test_user_field_kinds():
    user = User()
    assert isinstance(user.name, ReadWrite)
    assert isinstance(user.bytes_in, ReadOnly)
    assert not isinstance(user.bytes_in, ReadWrite)
    user.name.value = "guest"
    assert user.name == "guest"
    assert user.name.changed
    assert not user.bytes_in.has_value


def test_user_defaults_applied_by_converter():
    user = User()
    user.convert(_apply_defaults)
    assert user.server == "all"
    assert user.profile == "default"
    assert user.server.has_value
    assert not user.uptime.has_value


def test_user_profile_property_order():
    profile = UserProfile()
    names = _record(profile).names
    assert profile.api_path == "/ip/hotspot/user/profile"
    assert names == [
        ".id", "address-list", "address-pool", "advertise", "advertise-interval",
        "advertise-timeout", "advertise-url", "idle-timeout", "incoming-filter",
        "incoming-packet-mark", "keepalive-timeout", "name", "on-login",
        "on-logout", "open-status-page", "outgoing-filter",
        "outgoing-packet-mark", "rate-limit", "shared-users", "session-timeout",
        "status-autorefresh", "transparent-proxy",
    ]


@pytest.mark.parametrize(
    "name, expected",
    [
        ("advertise", False),
        ("advertise-interval", "30m,10m"),
        ("advertise-timeout", "1m"),
        ("open-status-page", "always"),
        ("shared-users", 1),
        ("session-timeout", timedelta(0)),
        ("transparent-proxy", True),
        ("rate-limit", ""),
    ],
)
def test_user_profile_defaults(name, expected):
    assert _record(UserProfile()).default_of(name) == expected


@pytest.mark.parametrize("name", ["address-pool", "idle-timeout", "status-autorefresh"])
def test_user_profile_without_default(name):
    assert _record(UserProfile()).default_of(name) is _NO_DEFAULT


def test_user_profile_defaults_mark_changed():
    profile = UserProfile()
    profile.convert(_apply_defaults)
    assert profile.transparent_proxy.value is True
    assert profile.transparent_proxy.changed
    assert not profile.address_pool.has_value
    assert not profile.address_pool.changed


def test_models_are_independent():
    first, second = UserProfile(), UserProfile()
    first.name.value = "guests"
    assert first.name == "guests"
    assert not second.name.has_value
    assert first.name is not second.name