## namelist.py
# Parsing of NAMES replies (RPL_NAMREPLY), with or without NAMESX and UHNAMES.
from . import protocol
from .models import ChannelStatus
from .names import Nickname, Username, ChannelName
from .rfc1459 import protocol as rfc1459

__all__ = [ 'NameListEntry', 'NameReply' ]


class NameListEntry:
    """
    A single user in a NAMES reply.

    Depending on what the server supports, an entry arrives in one of four formats:
    a bare nickname, a nickname prefixed by one or more channel status symbols (NAMESX),
    a full nick!user@host mask (UHNAMES), or a prefixed full mask (NAMESX and UHNAMES).
    Without NAMESX, servers still prefix the single highest status.
    """
    __slots__ = ('nickname', 'username', 'hostname', 'prefixes')

    def __init__(self, nickname, username=None, hostname=None, prefixes=None):
        self.nickname = nickname
        self.username = username
        self.hostname = hostname
        self.prefixes = prefixes

    @classmethod
    def parse(cls, entry):
        """ Parse a single space-delimited NAMES entry. """
        if not entry:
            raise protocol.FormatError('Empty name list entry.', entry)

        match = rfc1459.NICKNAME_START_PATTERN.search(entry)
        if not match:
            raise protocol.FormatError('Name list entry does not contain a nickname: {!r}'.format(entry), entry)

        # Everything before the nickname is a status prefix.
        start = match.start()
        prefixes = entry[:start] or None
        mask = entry[start:]

        username = None
        hostname = None
        if rfc1459.USER_SEPARATOR in mask:
            nickname, user = mask.split(rfc1459.USER_SEPARATOR, 1)
            if rfc1459.HOST_SEPARATOR in user:
                user, hostname = user.split(rfc1459.HOST_SEPARATOR, 1)
            username = Username(user)
        else:
            nickname = mask

        return cls(Nickname(nickname), username, hostname, prefixes)

    @property
    def status(self):
        """ Channel status as indicated by the prefixes of this entry. """
        return ChannelStatus.from_prefixes(self.prefixes)

    @property
    def hostmask(self):
        return '{n}!{u}@{h}'.format(n=self.nickname, u=self.username or '*', h=self.hostname or '*')

    def __eq__(self, other):
        if not isinstance(other, NameListEntry):
            return NotImplemented
        return (self.nickname, self.username, self.hostname, self.prefixes) == \
               (other.nickname, other.username, other.hostname, other.prefixes)

    def __hash__(self):
        return hash((self.nickname, self.username, self.hostname, self.prefixes))

    def __str__(self):
        entry = (self.prefixes or '') + str(self.nickname)
        if self.username is not None:
            entry += rfc1459.USER_SEPARATOR + str(self.username)
        if self.hostname is not None:
            entry += rfc1459.HOST_SEPARATOR + self.hostname
        return entry

    def __repr__(self):
        return '{cls}.parse({entry!r})'.format(cls=self.__class__.__name__, entry=str(self))


class NameReply:
    """ A full RPL_NAMREPLY: channel, its visibility and the users listed for it. """

    def __init__(self, channel, visibility, entries):
        self.channel = channel
        self.visibility = visibility
        self.entries = entries

    @classmethod
    def parse(cls, params):
        """
        Parse the parameters of an RPL_NAMREPLY, either with the leading target
        ([target, visibility, channel, names]) or without it ([visibility, channel, names]).
        """
        if params is None:
            raise protocol.NullOrEmptyError('params')
        params = list(params)
        if len(params) == 4:
            params = params[1:]
        if len(params) != 3:
            raise protocol.FormatError('Improper NAMES reply: expected 3 or 4 parameters, got {}.'.format(len(params)),
                                       ' '.join(params))

        visibility, channel, names = params
        if visibility not in (rfc1459.PUBLIC_CHANNEL_SIGIL, rfc1459.PRIVATE_CHANNEL_SIGIL, rfc1459.SECRET_CHANNEL_SIGIL):
            raise protocol.FormatError('Unknown channel visibility in NAMES reply: {!r}'.format(visibility), visibility)

        entries = [ NameListEntry.parse(name) for name in rfc1459.ARGUMENT_SEPARATOR.split(names) if name ]
        return cls(ChannelName(channel), visibility, entries)

    @property
    def public(self):
        return self.visibility == rfc1459.PUBLIC_CHANNEL_SIGIL

    @property
    def secret(self):
        return self.visibility == rfc1459.SECRET_CHANNEL_SIGIL

    def __iter__(self):
        return iter(self.entries)

    def __len__(self):
        return len(self.entries)

    def __repr__(self):
        return '{cls}({chan!r}, {vis!r}, {entries!r})'.format(
            cls=self.__class__.__name__, chan=self.channel, vis=self.visibility, entries=self.entries)
