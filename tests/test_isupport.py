import pytest
import irctypes
from irctypes import ServerSupport, ChannelStatus


def test_defaults():
    support = ServerSupport()
    assert support.channel_modes == set('opsitnbvmrkl')
    assert support.always_parameter_modes == set('bov')
    assert support.add_parameter_modes == set('kl')
    assert support.status_modes == { 'o', 'v' }
    assert support.mode_limit is None
    assert not support.namesx
    assert not support.uhnames
    assert support.network is None
    assert support.case_mapping == 'rfc1459'


def test_update_features():
    support = ServerSupport()
    support.update([ 'NAMESX', 'uhnames', 'NETWORK=ExampleNet', 'CASEMAPPING=ascii', 'MODES=4', 'FOO=bar' ])
    assert support.namesx
    assert support.uhnames
    assert support.network == 'ExampleNet'
    assert support.case_mapping == 'ascii'
    assert support.mode_limit == 4
    assert support.features['FOO'] == 'bar'
    assert support.features['NAMESX'] is True


def test_disable_feature():
    support = ServerSupport()
    support.update([ 'NAMESX' ])
    support.update([ '-NAMESX' ])
    assert not support.namesx
    assert support.features['NAMESX'] is False


def test_odd_values():
    support = ServerSupport()
    support.update([ 'NETWORK', 'CASEMAPPING=klingon', 'MODES' ])
    assert support.network is None
    assert support.case_mapping == 'rfc1459'
    assert support.mode_limit is None


def test_invalid_value():
    support = ServerSupport()
    with pytest.raises(irctypes.FormatError) as excinfo:
        support.update([ 'MODES=abc' ])
    assert isinstance(excinfo.value.__cause__, ValueError)
    assert excinfo.value.irc_message == 'abc'


def check_modern_modes(support):
    assert support.always_parameter_modes == set('beIkqaohv')
    assert support.add_parameter_modes == set('l')
    assert support.status_modes == set('qaohv')
    assert support.channel_modes >= set('beIklimnpstqaohv')


def test_chanmodes_then_prefix():
    support = ServerSupport()
    support.update([ 'CHANMODES=beI,k,l,imnpst', 'PREFIX=(qaohv)~&@%+' ])
    check_modern_modes(support)


def test_prefix_then_chanmodes():
    support = ServerSupport()
    support.update([ 'PREFIX=(qaohv)~&@%+' ])
    support.update([ 'CHANMODES=beI,k,l,imnpst' ])
    check_modern_modes(support)


def test_short_chanmodes():
    support = ServerSupport()
    support.update([ 'CHANMODES=b,k' ])
    assert support.add_parameter_modes == set()
    assert 'k' in support.always_parameter_modes


def test_prefix_order():
    support = ServerSupport()
    support.update([ 'PREFIX=(ov)@+' ])
    assert list(support.nickname_prefixes.items()) == [ ('@', 'o'), ('+', 'v') ]


def test_prefix_cleared():
    support = ServerSupport()
    support.update([ 'PREFIX=' ])
    assert support.status_modes == frozenset()
    assert support.status_for_prefixes('@') == ChannelStatus.NONE


def test_excepts_and_invex():
    support = ServerSupport()
    support.update([ 'EXCEPTS', 'INVEX' ])
    assert { 'e', 'I' } <= support.channel_modes
    assert { 'e', 'I' } <= support.always_parameter_modes

    support = ServerSupport()
    support.update([ 'EXCEPTS=E' ])
    assert 'E' in support.always_parameter_modes


def test_chanmodes_keeps_list_modes():
    support = ServerSupport()
    support.update([ 'EXCEPTS', 'CHANMODES=,k,l,imnpst' ])
    assert 'e' in support.always_parameter_modes
    assert 'b' in support.always_parameter_modes


def test_parse_with_support():
    support = ServerSupport()
    support.update([ 'CHANMODES=beI,k,l,imnpst', 'PREFIX=(qaohv)~&@%+' ])
    modes = support.parse_channel_modes('+qk-lh alice key bob')
    assert [ (mode.char, mode.is_added, mode.parameter) for mode in modes ] == \
        [ ('q', True, 'alice'), ('k', True, 'key'), ('l', False, None), ('h', False, 'bob') ]

    modes = support.parse_client_modes('+iw')
    assert isinstance(modes, irctypes.ClientModeString)


def test_validate():
    support = ServerSupport()
    modes = support.parse_channel_modes('+nt')
    assert support.validate_channel_modes(modes) is modes
    with pytest.raises(irctypes.UnsupportedModeError):
        support.validate_channel_modes(support.parse_channel_modes('+c'))

    support.update([ 'CHANMODES=b,k,l,cimnpst' ])
    support.validate_channel_modes(support.parse_channel_modes('+c'))

    assert support.validate_client_modes(support.parse_client_modes('+iw'))
    with pytest.raises(irctypes.UnsupportedModeError):
        support.validate_client_modes(support.parse_client_modes('+x'))


def test_status_for_prefixes():
    support = ServerSupport()
    assert support.status_for_prefixes('@+') == ChannelStatus.OPERATOR | ChannelStatus.VOICE
    assert support.status_for_prefixes('~') == ChannelStatus.NONE
    assert support.status_for_prefixes(None) == ChannelStatus.NONE

    support.update([ 'PREFIX=(qaohv)~&@%+' ])
    assert support.status_for_prefixes('~%') == ChannelStatus.OWNER | ChannelStatus.HALF_OPERATOR
