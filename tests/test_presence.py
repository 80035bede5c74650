import json

from chordlet.presence import Presence, PresenceStatus


def test_default_is_offline_everywhere():
    presence = Presence()
    assert presence.status() == PresenceStatus.OFFLINE
    assert presence.desktop_status() == PresenceStatus.OFFLINE
    assert presence.web_status() == PresenceStatus.OFFLINE
    assert presence.mobile_status() == PresenceStatus.OFFLINE


def test_fill_statuses():
    data = {
        "guild_id": "10",
        "user": {"id": "20"},
        "status": "idle",
        "client_status": {"desktop": "online", "mobile": "dnd", "web": "idle"},
    }
    presence = Presence().fill_from_json(data)
    assert presence.guild_id == 10
    assert presence.user_id == 20
    assert presence.status() == PresenceStatus.IDLE
    assert presence.desktop_status() == PresenceStatus.ONLINE
    assert presence.mobile_status() == PresenceStatus.DND
    assert presence.web_status() == PresenceStatus.IDLE


def test_partial_update_keeps_other_clients():
    presence = Presence().fill_from_json(
        {"client_status": {"desktop": "online", "web": "dnd"}}
    )
    presence.fill_from_json({"client_status": {"desktop": "idle"}})
    assert presence.desktop_status() == PresenceStatus.IDLE
    assert presence.web_status() == PresenceStatus.DND


def test_unknown_status_is_offline():
    presence = Presence().fill_from_json({"status": "online"})
    presence.fill_from_json({"status": "invisible"})
    assert presence.status() == PresenceStatus.OFFLINE


def test_fill_activities_replaces_list():
    presence = Presence.with_activity(PresenceStatus.ONLINE, 0, "old")
    data = {
        "activities": [
            {
                "name": "game",
                "state": "playing",
                "type": 2,
                "created_at": 1000,
                "timestamps": {"start": 5, "end": 6},
                "application_id": "77",
            }
        ]
    }
    presence.fill_from_json(data)
    assert len(presence.activities) == 1
    activity = presence.activities[0]
    assert activity.name == "game"
    assert activity.state == "playing"
    assert activity.type == 2
    assert activity.created_at == 1000
    assert (activity.start, activity.end) == (5, 6)
    assert activity.application_id == 77


def test_with_activity_sets_status():
    presence = Presence.with_activity(PresenceStatus.DND, 3, "music")
    assert presence.status() == PresenceStatus.DND
    assert presence.activities[0].name == "music"
    assert presence.activities[0].type == 3


def test_build_json_payload():
    presence = Presence.with_activity(PresenceStatus.IDLE, 1, "stream")
    decoded = json.loads(presence.build_json())
    assert decoded["op"] == 3
    assert decoded["d"]["status"] == "idle"
    assert decoded["d"]["since"] is None
    assert decoded["d"]["afk"] is False
    assert decoded["d"]["game"] == {"name": "stream", "type": 1}


def test_build_json_without_activity():
    decoded = json.loads(Presence().build_json())
    assert decoded["d"]["status"] == "offline"
    assert "game" not in decoded["d"]