## protocol.py
# RFC1459 protocol constants.
import re
import collections


## Message parsing.

USER_SEPARATOR = '!'
HOST_SEPARATOR = '@'
ADD_SIGIL = '+'
REMOVE_SIGIL = '-'

PRIVATE_CHANNEL_SIGIL = '@'
SECRET_CHANNEL_SIGIL = '*'
PUBLIC_CHANNEL_SIGIL = '='

ARGUMENT_SEPARATOR = re.compile(' +', re.UNICODE)


## Identifiers.

NICKNAME_PATTERN = re.compile(r'^[a-zA-Z\x5B-\x60\x7B-\x7D][a-zA-Z0-9\x5B-\x60\x7B-\x7D\-]*\Z')
# Everything a nickname may start with, used to find where NAMESX status prefixes end.
NICKNAME_START_PATTERN = re.compile(r'[a-zA-Z\[\]\\`_\^{}\|-]')
USERNAME_PATTERN = re.compile(r'^[^\x00\r\n\s@]*\Z')
CHANNEL_PATTERN = re.compile(r'^[#&+!][^\x07\s,]{1,50}\Z')
CHANNEL_PREFIXES = { '#', '&', '+', '!' }
DEFAULT_CHANNEL_PREFIX = '#'


## Modes.

# Every channel mode we know about across common server implementations.
CHANNEL_MODES = frozenset('aAbcCefFgGhiIjkKlLmMnNoOpPqQrRsStTuvVz')
# Channel modes that target users or masks, and so may appear several times in one mode string.
CHANNEL_USER_MODES = frozenset('behIov')
CLIENT_MODES = frozenset('aANCiwroOsxdghpqtvzBGHRTVW')

BAN_MODE = 'b'
BAN_EXCEPT_MODE = 'e'
INVITE_EXCEPT_MODE = 'I'
LIST_MODES = frozenset((BAN_MODE, BAN_EXCEPT_MODE, INVITE_EXCEPT_MODE))

# Parameter behaviour before the server tells us otherwise through ISUPPORT.
DEFAULT_ALWAYS_PARAMETER_MODES = 'bov'
DEFAULT_ADD_PARAMETER_MODES = 'kl'
# What a plain RFC1459 server supports.
DEFAULT_CHANNEL_MODES = frozenset('opsitnbvmrkl')
DEFAULT_CLIENT_MODES = frozenset('iwso')


## Channel status.

OWNER_PREFIX = '~'
PROTECTED_PREFIX = '&'
OPERATOR_PREFIX = '@'
HALF_OPERATOR_PREFIX = '%'
VOICE_PREFIX = '+'

OWNER_MODE = 'q'
PROTECTED_MODE = 'a'
OPERATOR_MODE = 'o'
HALF_OPERATOR_MODE = 'h'
VOICE_MODE = 'v'

NICKNAME_PREFIXES = collections.OrderedDict([
    ('@', 'o'),
    ('+', 'v')
])
CASE_MAPPINGS = { 'ascii', 'rfc1459', 'strict-rfc1459' }
DEFAULT_CASE_MAPPING = 'rfc1459'
