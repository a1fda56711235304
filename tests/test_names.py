import pytest
import irctypes
from irctypes import Identifier, Nickname, Username, ChannelName
from .fixtures import random_nickname, random_invalid_nickname, toggle_case, seeded_random


## Identifier.

def test_identifier_equality_ignores_case():
    assert Identifier('WiZ') == Identifier('wiz')
    assert Identifier('WiZ').equals(Identifier('WIZ'))
    assert Identifier('WiZ') != Identifier('jilles')
    assert hash(Identifier('WiZ')) == hash(Identifier('wIz'))


def test_identifier_keeps_original_case():
    name = Identifier('WiZ')
    assert str(name) == 'WiZ'
    assert name.as_str() == 'WiZ'
    assert len(name) == 3


def test_identifier_allows_empty():
    assert str(Identifier('')) == ''


def test_identifier_rejects_none():
    with pytest.raises(irctypes.NullOrEmptyError):
        Identifier(None)


def test_identifier_equality_across_kinds():
    assert Identifier('abc') == Nickname('ABC')
    assert Nickname('abc') == Username('abc')


def test_identifier_not_equal_to_other_types():
    assert not Identifier('abc').equals(None)
    assert not Identifier('abc').equals('abc')
    assert Identifier('abc') != 'abc'


def test_identifier_as_key():
    users = { Nickname('WiZ'): 1 }
    assert users[Nickname('wiz')] == 1
    assert Nickname('WIZ') in users
    assert Nickname('jilles') not in users


def test_identifier_ordering_uses_original_case():
    assert Nickname('TestName').compare_to(Nickname('TettName')) < 0
    assert Nickname('TettName').compare_to(Nickname('TestName')) > 0
    assert Nickname('TestName').compare_to(Nickname('TestName')) == 0
    # Equal, but not the same when sorting.
    assert Nickname('B') == Nickname('b')
    assert Nickname('B').compare_to(Nickname('b')) < 0
    assert [ str(n) for n in sorted([ Nickname('b'), Nickname('a'), Nickname('B') ]) ] == [ 'B', 'a', 'b' ]


def test_identifier_compare_to_others_is_positive():
    nickname = Nickname('TestName')
    assert nickname.compare_to(None) > 0
    assert nickname.compare_to(object()) > 0
    assert nickname.compare_to(nickname) == 0


def test_identifier_contains():
    nickname = Nickname('TestName')
    assert nickname.contains('stN')
    assert nickname.contains('STn')
    assert not nickname.contains('r')
    with pytest.raises(irctypes.NullOrEmptyError):
        nickname.contains(None)


def test_identifier_starts_with():
    nickname = Nickname('TestName')
    assert nickname.starts_with('TestN')
    assert nickname.starts_with('testn')
    assert not nickname.starts_with('Hello')
    with pytest.raises(irctypes.NullOrEmptyError):
        nickname.starts_with(None)


@pytest.mark.slow
def test_identifier_case_toggling():
    rng = seeded_random()
    for _ in range(500):
        raw = random_nickname(rng)
        nickname, toggled = Nickname(raw), Nickname(toggle_case(raw))
        assert nickname == toggled
        assert hash(nickname) == hash(toggled)
        assert str(toggled) == toggle_case(raw)


## Nickname.

def test_nickname_valid():
    for raw in ('WiZ', 'jilles', '[Guest]', 'a-b', '`^_|{}', 'n1ck'):
        assert str(Nickname(raw)) == raw
        assert Nickname.is_valid(raw)


def test_nickname_first_character():
    for i in range(65, 126):
        assert Nickname.is_valid(chr(i))
    for char in '0123456789-!@# ':
        assert not Nickname.is_valid(char)


def test_nickname_rejects_none():
    with pytest.raises(irctypes.NullOrEmptyError):
        Nickname(None)


def test_nickname_rejects_invalid():
    for raw in ('', '      ', '3TestName', 'Test Name', 'nick!user', 'nick@host', 'nick\n'):
        with pytest.raises(irctypes.FormatError):
            Nickname(raw)
        assert not Nickname.is_valid(raw)


def test_nickname_parse():
    assert Nickname.parse('TestName') == Nickname('TestName')
    assert Nickname.try_parse('TestName') == Nickname('TestName')
    assert Nickname.try_parse('3TestName') is None
    assert Nickname.try_parse(None) is None


@pytest.mark.slow
def test_nickname_random():
    rng = seeded_random()
    for _ in range(500):
        assert Nickname.is_valid(random_nickname(rng))
        assert not Nickname.is_valid(random_invalid_nickname(rng))


## Username.

def test_username_valid():
    for raw in ('user', '~user', 'a.b', ''):
        assert str(Username(raw)) == raw


def test_username_invalid():
    for raw in ('us er', 'user@host', 'user\r', 'user\n', 'us\x00er', '\tuser'):
        with pytest.raises(irctypes.FormatError):
            Username(raw)
    with pytest.raises(irctypes.NullOrEmptyError):
        Username(None)


## ChannelName.

def test_channel_name_valid():
    for raw in ('#lobby', '&local', '+modeless', '!ABCDEsafe', '#ä'):
        assert str(ChannelName(raw)) == raw


def test_channel_name_adds_prefix():
    assert str(ChannelName('lobby')) == '#lobby'
    assert ChannelName('lobby') == ChannelName('#LOBBY')


def test_channel_name_invalid():
    for raw in ('#', '#a,b', '#a b', '#bell\x07', '#' + 'a' * 51):
        with pytest.raises(irctypes.FormatError):
            ChannelName(raw)
    assert ChannelName.is_valid('#' + 'a' * 50)


def test_channel_name_empty():
    for raw in (None, ''):
        with pytest.raises(irctypes.NullOrEmptyError):
            ChannelName(raw)
        assert not ChannelName.is_valid(raw)
