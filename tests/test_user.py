import pytest

from chordlet.user import User, UserFlags

HASH = "0123456789abcdef0123456789abcdef"


def test_defaults():
    user = User()
    assert user.refcount == 1
    assert user.flags == 0
    assert user.avatar.to_string() == ""


def test_fill_basic_fields():
    user = User().fill_from_json(
        {"id": "4242", "username": "someone", "avatar": HASH, "discriminator": "0007"}
    )
    assert user.id == 4242
    assert user.username == "someone"
    assert user.discriminator == 7
    assert user.avatar.to_string() == HASH
    assert not user.has_animated_icon()


def test_static_avatar_url():
    user = User().fill_from_json({"id": "99", "avatar": HASH})
    assert user.get_avatar_url() == f"https://cdn.discordapp.com/avatars/99/{HASH}.png"


def test_animated_avatar():
    user = User().fill_from_json({"id": "99", "avatar": "a_" + HASH})
    assert user.has_animated_icon()
    assert user.avatar.to_string() == HASH
    assert user.get_avatar_url() == f"https://cdn.discordapp.com/avatars/99/a_{HASH}.gif"


def test_boolean_flags():
    user = User().fill_from_json(
        {"bot": True, "system": True, "mfa_enabled": False, "verified": True}
    )
    assert user.is_bot()
    assert user.is_system()
    assert not user.is_mfa_enabled()
    assert user.is_verified()


def test_premium_type_sets_classic():
    user = User().fill_from_json({"premium_type": 1})
    assert user.has_nitro_classic()
    assert not user.has_nitro_full()


@pytest.mark.parametrize(
    "bit, check",
    [
        (1 << 0, User.is_discord_employee),
        (1 << 1, User.is_partnered_owner),
        (1 << 2, User.has_hypesquad_events),
        (1 << 3, User.is_bughunter_1),
        (1 << 6, User.is_house_bravery),
        (1 << 7, User.is_house_brilliance),
        (1 << 8, User.is_house_balance),
        (1 << 9, User.is_early_supporter),
        (1 << 10, User.is_team_user),
        (1 << 14, User.is_bughunter_2),
        (1 << 16, User.is_verified_bot),
        (1 << 17, User.is_verified_bot_dev),
    ],
)
def test_public_flags(bit, check):
    user = User().fill_from_json({"flags": bit})
    assert check(user)
    assert not user.is_bot()


def test_flags_accumulate_over_fills():
    user = User().fill_from_json({"bot": True})
    user.fill_from_json({"verified": True})
    assert user.is_bot() and user.is_verified()
    assert user.flags == UserFlags.BOT | UserFlags.VERIFIED


def test_bad_avatar_length_raises():
    with pytest.raises(ValueError):
        User().fill_from_json({"avatar": "abc123"})


def test_missing_fields_are_empty():
    user = User().fill_from_json({})
    assert (user.id, user.username, user.discriminator) == (0, "", 0)