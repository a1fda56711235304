## isupport.py
# ISUPPORT (server-side IRC extension indication) support.
# See: http://tools.ietf.org/html/draft-hardy-irc-isupport-00
import collections
import logging

from . import protocol
from .models import ChannelStatus, MODE_STATUSES
from .modes import ChannelModeString, ClientModeString
from .rfc1459 import protocol as rfc1459

__all__ = [ 'ServerSupport' ]
logger = logging.getLogger(__name__)


FEATURE_DISABLED_PREFIX = '-'


class ServerSupport:
    """
    What the server told us it supports, and how its modes and name lists have to be parsed as a result.
    Starts out with plain RFC1459 behaviour until updated with ISUPPORT features.
    """

    def __init__(self):
        self.features = {}
        self.channel_modes = set(rfc1459.DEFAULT_CHANNEL_MODES)
        self.client_modes = set(rfc1459.DEFAULT_CLIENT_MODES)
        self.always_parameter_modes = set(rfc1459.DEFAULT_ALWAYS_PARAMETER_MODES)
        self.add_parameter_modes = set(rfc1459.DEFAULT_ADD_PARAMETER_MODES)
        self.nickname_prefixes = collections.OrderedDict(rfc1459.NICKNAME_PREFIXES)
        # Informational: nothing here splits mode changes to fit it.
        self.mode_limit = None

    def update(self, features):
        """
        Take in ISUPPORT features, as found between the target and the trailing text of an RPL_ISUPPORT reply.
        Features are KEY, KEY=value or -KEY (disabled).
        """
        isupport = {}
        for feature in features:
            if feature.startswith(FEATURE_DISABLED_PREFIX):
                feature, value = feature[len(FEATURE_DISABLED_PREFIX):], False
            elif '=' in feature:
                feature, value = feature.split('=', 1)
            else:
                value = True
            isupport[feature.upper()] = value

        # Update internal dict first.
        self.features.update(isupport)

        # And have handlers update other internals.
        for entry, value in isupport.items():
            if value is False:
                logger.debug('ISUPPORT feature disabled: %s', entry)
                continue
            # A value of True technically means there was no value supplied; correct this for handlers.
            if value is True:
                value = None

            method = 'on_isupport_' + protocol.identifierify(entry)
            if hasattr(self, method):
                logger.debug('ISUPPORT %s=%s', entry, value)
                try:
                    getattr(self, method)(value)
                except ValueError as e:
                    raise protocol.FormatError('Invalid value for ISUPPORT feature {}: {!r}'.format(entry, value), value) from e
            else:
                logger.debug('Unhandled ISUPPORT feature: %s', entry)


    ## Negotiated values.

    @property
    def namesx(self):
        """ Whether NAMES replies carry every status prefix of a user instead of only the highest. """
        return bool(self.features.get('NAMESX'))

    @property
    def uhnames(self):
        """ Whether NAMES replies carry full nick!user@host masks. """
        return bool(self.features.get('UHNAMES'))

    @property
    def network(self):
        value = self.features.get('NETWORK')
        return value if isinstance(value, str) else None

    @property
    def case_mapping(self):
        """ Advertised case mapping, for information only. Identifiers always compare by plain upper-casing. """
        value = self.features.get('CASEMAPPING')
        if value in rfc1459.CASE_MAPPINGS:
            return value
        return rfc1459.DEFAULT_CASE_MAPPING

    @property
    def status_modes(self):
        """ Channel modes that grant a status to a user. """
        return frozenset(self.nickname_prefixes.values())


    ## Parsing with negotiated behaviour.

    def parse_channel_modes(self, text):
        return ChannelModeString.parse(text, self.always_parameter_modes, self.add_parameter_modes)

    def parse_client_modes(self, text):
        return ClientModeString.parse(text)

    def validate_channel_modes(self, modes):
        """ Raise UnsupportedModeError if the mode string uses a channel mode this server does not support. """
        return modes.validate(self.channel_modes)

    def validate_client_modes(self, modes):
        return modes.validate(self.client_modes)

    def status_for_prefixes(self, prefixes):
        """ Channel status for prefix symbols, using the symbols this server advertised. """
        status = ChannelStatus.NONE
        for prefix in (prefixes or ''):
            mode = self.nickname_prefixes.get(prefix)
            if mode in MODE_STATUSES:
                status |= MODE_STATUSES[mode]
        return status


    ## ISUPPORT handlers.

    def on_isupport_chanmodes(self, value):
        """ Valid channel modes and their behaviour. """
        groups = (value or '').split(',')
        groups += [ '' ] * (4 - len(groups))
        list, param, param_set, noparams = [ set(modes) for modes in groups[:4] ]

        self.channel_modes.update(list | param | param_set | noparams)
        # PREFIX modes are not part of CHANMODES, but still always take a parameter.
        self.always_parameter_modes = list | param | set(self.nickname_prefixes.values()) | \
            (self.always_parameter_modes & rfc1459.LIST_MODES)
        self.add_parameter_modes = param_set

    def on_isupport_excepts(self, value):
        """ Server allows ban exceptions. """
        if not value:
            value = rfc1459.BAN_EXCEPT_MODE
        self.channel_modes.add(value)
        self.always_parameter_modes.add(value)

    def on_isupport_invex(self, value):
        """ Server allows invite exceptions. """
        if not value:
            value = rfc1459.INVITE_EXCEPT_MODE
        self.channel_modes.add(value)
        self.always_parameter_modes.add(value)

    def on_isupport_modes(self, value):
        """ Maximum number of variable modes to change in a single MODE command. """
        if value:
            self.mode_limit = int(value)

    def on_isupport_prefix(self, value):
        """ Nickname prefixes on channels and their associated modes. """
        if not value:
            # No prefixes support.
            self.nickname_prefixes = collections.OrderedDict()
            return

        modes, prefixes = value.lstrip('(').split(')', 1)

        # Update valid channel modes and their behaviour as CHANMODES doesn't include PREFIX modes.
        self.channel_modes.update(modes)
        self.always_parameter_modes.update(modes)

        self.nickname_prefixes = collections.OrderedDict()
        for mode, prefix in zip(modes, prefixes):
            self.nickname_prefixes[prefix] = mode
