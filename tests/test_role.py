import json

from chordlet.role import Role, RoleFlags


SAMPLE = {
    "id": "41771983423143936",
    "name": "WE DEM BOYZZ!!!!!!",
    "color": 3447003,
    "hoist": True,
    "position": 1,
    "permissions": "66321471",
    "managed": False,
    "mentionable": False,
}


def test_fill_from_json_fields():
    role = Role().fill_from_json(77, SAMPLE)
    assert role.guild_id == 77
    assert role.id == 41771983423143936
    assert role.name == "WE DEM BOYZZ!!!!!!"
    assert role.colour == 3447003
    assert role.position == 1
    assert role.permissions == 66321471
    assert role.is_hoisted()
    assert not role.is_mentionable()
    assert not role.is_managed()


def test_tags():
    data = dict(SAMPLE, tags={"bot_id": "5", "integration_id": "6", "premium_subscriber": True})
    role = Role().fill_from_json(1, data)
    assert role.bot_id == 5
    assert role.integration_id == 6
    assert role.is_premium_subscriber()


def test_null_premium_subscriber_is_false():
    data = dict(SAMPLE, tags={"premium_subscriber": None})
    role = Role().fill_from_json(1, data)
    assert not role.is_premium_subscriber()


def test_build_json_round_trip():
    role = Role().fill_from_json(1, SAMPLE)
    body = json.loads(role.build_json(True))
    assert body == {
        "id": "41771983423143936",
        "color": 3447003,
        "position": 1,
        "permissions": 66321471,
        "hoist": True,
        "mentionable": False,
    }


def test_build_json_omits_zero_colour_and_id():
    role = Role(flags=int(RoleFlags.MENTIONABLE))
    body = json.loads(role.build_json())
    assert "color" not in body
    assert "id" not in body
    assert body["mentionable"] is True


def test_flags_accumulate():
    role = Role().fill_from_json(1, {"mentionable": True})
    role.fill_from_json(1, {"managed": True})
    assert role.is_mentionable()
    assert role.is_managed()