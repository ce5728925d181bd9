from __future__ import annotations

import pytest

from pyaetherfm.config import AetherFmConfig
from pyaetherfm.exceptions import AetherFmTransportError
from pyaetherfm.gateway import AetherFmGateway
from pyaetherfm.models.capability import RemoteCapability

P = "AetherFM."

# (method name, positional args, fallback)
OPERATIONS = [
    ("ipc_version", (), 0),
    ("feature_flags", (), 0),
    ("is_ready", (), False),
    ("get_current_station", (), ""),
    ("get_current_station_url", (), ""),
    ("get_status", (), ""),
    ("play", (), False),
    ("pause", (), False),
    ("stop", (), False),
    ("resume_last", (), False),
    ("toggle_play_pause", (), False),
    ("open_window", (), False),
    ("toggle_window", (), False),
    ("open_mini_player", (), False),
    ("toggle_mini_player", (), False),
    ("play_by_url", ("http://x",), False),
    ("play_by_name", ("Jazz FM",), False),
    ("get_favorites", (), ()),
    ("get_favorite_names", (), ()),
    ("add_favorite", ("http://x",), False),
    ("remove_favorite", ("http://x",), False),
    ("get_volume", (), 0.0),
    ("set_volume", (0.5,), False),
    ("subscribe_status_changed", (lambda status: None,), False),
    ("unsubscribe_status_changed", (lambda status: None,), False),
]


@pytest.mark.parametrize(("method", "args", "fallback"), OPERATIONS)
def test_every_operation_returns_fallback_when_transport_fails(make_gateway, method, args, fallback) -> None:
    gateway, _ = make_gateway(fail_all=True)

    assert getattr(gateway, method)(*args) == fallback


@pytest.mark.parametrize(("method", "args", "fallback"), OPERATIONS)
def test_every_operation_returns_fallback_on_remote_exception(make_gateway, method, args, fallback) -> None:
    class _Exploding:
        def invoke(self, name, *a):
            raise RuntimeError("remote side crashed")

        def register_callback(self, name, handler):
            raise RuntimeError("remote side crashed")

        def unregister_callback(self, name, handler):
            raise RuntimeError("remote side crashed")

    gateway = AetherFmGateway(_Exploding())

    assert getattr(gateway, method)(*args) == fallback


def test_is_available_is_not_a_remote_call_of_its_own(make_gateway) -> None:
    gateway, transport = make_gateway(fail_all=True)

    assert gateway.is_available() is False
    assert all(name in {f"{P}IsReady", f"{P}IpcVersion"} for name, _ in transport.calls)


def test_successful_reads_return_remote_values(make_gateway) -> None:
    gateway, _ = make_gateway(
        {
            f"{P}IpcVersion": 3,
            f"{P}FeatureFlags": 0b101,
            f"{P}IsReady": True,
            f"{P}GetStatus": "Paused",
            f"{P}GetCurrentStation": "Jazz FM",
            f"{P}GetCurrentStationUrl": "http://jazz",
            f"{P}GetFavorites": ["http://a", "http://b"],
        }
    )

    assert gateway.ipc_version() == 3
    assert gateway.feature_flags() == 5
    assert gateway.is_ready() is True
    assert gateway.get_status() == "Paused"
    assert gateway.get_current_station_reference().name == "Jazz FM"
    assert gateway.get_current_station_reference().url == "http://jazz"
    assert gateway.get_favorites() == ("http://a", "http://b")


def test_null_results_become_empty_values(make_gateway) -> None:
    gateway, _ = make_gateway(
        {
            f"{P}GetStatus": None,
            f"{P}GetCurrentStation": None,
            f"{P}GetFavorites": None,
            f"{P}GetVolume": None,
        }
    )

    assert gateway.get_status() == ""
    assert gateway.get_current_station() == ""
    assert gateway.get_favorites() == ()
    assert gateway.get_volume() == 0.0


@pytest.mark.parametrize(
    ("method", "gate", "bad_value", "fallback"),
    [
        ("ipc_version", "IpcVersion", "3", 0),
        ("ipc_version", "IpcVersion", True, 0),
        ("is_ready", "IsReady", 1, False),
        ("get_status", "GetStatus", 42, ""),
        ("get_favorites", "GetFavorites", "http://a", ()),
        ("get_favorites", "GetFavorites", [1, 2], ()),
        ("get_volume", "GetVolume", "loud", 0.0),
        ("play", "Play", "yes", False),
    ],
)
def test_type_mismatch_is_treated_as_failure(make_gateway, method, gate, bad_value, fallback) -> None:
    gateway, _ = make_gateway({f"{P}{gate}": bad_value})

    assert getattr(gateway, method)() == fallback


def test_none_string_arguments_are_sent_as_empty(make_gateway) -> None:
    gateway, transport = make_gateway({f"{P}PlayByUrl": True, f"{P}AddFavorite": True})

    assert gateway.play_by_url(None) is True
    assert gateway.add_favorite(None) is True
    assert transport.args_for(f"{P}PlayByUrl") == [("",)]
    assert transport.args_for(f"{P}AddFavorite") == [("",)]


def test_toggle_play_pause_uses_published_gate_name(make_gateway) -> None:
    gateway, transport = make_gateway({f"{P}TogglePlayStop": True})

    assert gateway.toggle_play_pause() is True
    assert transport.count(f"{P}TogglePlayStop") == 1


def test_gate_prefix_comes_from_config(make_gateway) -> None:
    gateway, transport = make_gateway({"Radio.IsReady": True}, config=AetherFmConfig(gate_prefix="Radio."))

    assert gateway.is_ready() is True
    assert transport.calls == [("Radio.IsReady", ())]


def test_one_failing_operation_does_not_affect_another(make_gateway) -> None:
    gateway, _ = make_gateway({f"{P}Play": True}, failing={f"{P}Pause"})

    assert gateway.pause() is False
    assert gateway.play() is True


def test_favorite_names_secondary_source_not_consulted_when_primary_has_entries(make_gateway) -> None:
    gateway, transport = make_gateway(
        {
            f"{P}GetFavoriteNames": ["Jazz FM"],
            f"{P}GetFavoritesNames": ["Other"],
        }
    )

    assert gateway.get_favorite_names() == ("Jazz FM",)
    assert transport.count(f"{P}GetFavoriteNames") == 1
    assert transport.count(f"{P}GetFavoritesNames") == 0


def test_favorite_names_secondary_source_used_when_primary_empty(make_gateway) -> None:
    gateway, transport = make_gateway(
        {
            f"{P}GetFavoriteNames": [],
            f"{P}GetFavoritesNames": ["Rock FM", "News"],
        }
    )

    assert gateway.get_favorite_names() == ("Rock FM", "News")
    assert transport.count(f"{P}GetFavoritesNames") == 1


def test_favorite_names_secondary_source_used_when_primary_fails(make_gateway) -> None:
    gateway, _ = make_gateway({f"{P}GetFavoritesNames": ["Rock FM"]}, failing={f"{P}GetFavoriteNames"})

    assert gateway.get_favorite_names() == ("Rock FM",)


def test_favorite_names_empty_when_both_sources_empty(make_gateway) -> None:
    gateway, _ = make_gateway({f"{P}GetFavoriteNames": None, f"{P}GetFavoritesNames": []})

    assert gateway.get_favorite_names() == ()


def test_favorites_collection_is_case_insensitive(make_gateway) -> None:
    gateway, _ = make_gateway(
        {
            f"{P}GetFavorites": ["HTTP://Jazz.example/stream"],
            f"{P}GetFavoriteNames": ["Jazz"],
        }
    )

    favorites = gateway.get_favorites_collection()

    assert favorites.contains("http://jazz.example/stream")
    assert not favorites.contains("http://rock.example/stream")
    assert not favorites.contains("")
    assert favorites.names == ("Jazz",)


@pytest.mark.parametrize("ready", [False, True])
@pytest.mark.parametrize("version", [0, 1, 2])
def test_is_available_matrix(make_gateway, ready, version) -> None:
    gateway, _ = make_gateway({f"{P}IsReady": ready, f"{P}IpcVersion": version})

    assert gateway.is_available() is (ready and version >= 1)


def test_is_available_respects_configured_minimum_version(make_gateway) -> None:
    gateway, _ = make_gateway(
        {f"{P}IsReady": True, f"{P}IpcVersion": 1},
        config=AetherFmConfig(min_ipc_version=2),
    )

    assert gateway.is_available() is False


def test_capability_combines_three_reads(make_gateway) -> None:
    gateway, _ = make_gateway({f"{P}IsReady": True, f"{P}IpcVersion": 2, f"{P}FeatureFlags": 0b11})

    capability = gateway.capability()

    assert capability == RemoteCapability(version=2, feature_flags=3, ready=True)
    assert capability.is_available()
    assert capability.has_feature(0b10)
    assert not capability.has_feature(0b100)


def test_capability_degrades_to_zero_values(make_gateway) -> None:
    gateway, _ = make_gateway(fail_all=True)

    assert gateway.capability() == RemoteCapability()


def test_transport_error_carries_gate_name() -> None:
    err = AetherFmTransportError("down", gate=f"{P}Play")

    assert err.gate == f"{P}Play"


def test_context_manager_closes_gateway(make_gateway) -> None:
    gateway, _ = make_gateway()

    with gateway as gw:
        assert gw is gateway
        assert not gw.closed

    assert gateway.closed
