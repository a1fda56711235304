## models.py
# Channel status, channel user and channel roster model classes.
import collections
import enum
import logging

from . import protocol
from .modes import ChannelModeString
from .names import Identifier, Nickname, ChannelName
from .rfc1459 import protocol as rfc1459

__all__ = [ 'ChannelStatus', 'ChannelUser', 'Channel' ]
logger = logging.getLogger(__name__)


class ChannelStatus(enum.IntFlag):
    """
    The rank(s) a user holds in a channel.
    Numeric value doubles as sort rank: any status sorts above every combination of lower statuses.
    """
    NONE = 0
    VOICE = 1
    HALF_OPERATOR = 2
    OPERATOR = 4
    PROTECTED = 8
    OWNER = 16

    @classmethod
    def from_prefixes(cls, prefixes):
        """ Status for a string of prefix symbols, such as '@+'. """
        status = cls.NONE
        for prefix, flag in PREFIX_STATUSES.items():
            if prefixes and prefix in prefixes:
                status |= flag
        return status

    @classmethod
    def from_modes(cls, modes):
        """ Status for a string of channel mode characters, such as 'ov'. """
        status = cls.NONE
        for mode, flag in MODE_STATUSES.items():
            if modes and mode in modes:
                status |= flag
        return status

    @property
    def prefixes(self):
        """ Prefix symbols for this status, highest rank first. """
        return ''.join(prefix for prefix, flag in PREFIX_STATUSES.items() if self & flag)

    @property
    def highest(self):
        """ The highest single rank in this status. """
        for flag in PREFIX_STATUSES.values():
            if self & flag:
                return flag
        return ChannelStatus.NONE


# Highest rank first.
PREFIX_STATUSES = collections.OrderedDict([
    (rfc1459.OWNER_PREFIX, ChannelStatus.OWNER),
    (rfc1459.PROTECTED_PREFIX, ChannelStatus.PROTECTED),
    (rfc1459.OPERATOR_PREFIX, ChannelStatus.OPERATOR),
    (rfc1459.HALF_OPERATOR_PREFIX, ChannelStatus.HALF_OPERATOR),
    (rfc1459.VOICE_PREFIX, ChannelStatus.VOICE)
])
MODE_STATUSES = collections.OrderedDict([
    (rfc1459.OWNER_MODE, ChannelStatus.OWNER),
    (rfc1459.PROTECTED_MODE, ChannelStatus.PROTECTED),
    (rfc1459.OPERATOR_MODE, ChannelStatus.OPERATOR),
    (rfc1459.HALF_OPERATOR_MODE, ChannelStatus.HALF_OPERATOR),
    (rfc1459.VOICE_MODE, ChannelStatus.VOICE)
])
# Without PREFIX from the server, only these modes are known to change user status.
DEFAULT_STATUS_MODES = frozenset((rfc1459.OPERATOR_MODE, rfc1459.HALF_OPERATOR_MODE, rfc1459.VOICE_MODE))


class ChannelUser:
    """ A user in a channel, along with their status there. """

    def __init__(self, nickname, status=ChannelStatus.NONE, username=None, hostname=None):
        if not isinstance(nickname, Nickname):
            nickname = Nickname(nickname)
        self.nickname = nickname
        self.status = ChannelStatus(status)
        self.username = username
        self.hostname = hostname

    @classmethod
    def from_entry(cls, entry, status=None):
        """ Create a channel user from a NAMES entry. """
        if status is None:
            status = entry.status
        return cls(entry.nickname, status, username=entry.username, hostname=entry.hostname)

    @property
    def hostmask(self):
        return '{n}!{u}@{h}'.format(n=self.nickname, u=self.username or '*', h=self.hostname or '*')

    @property
    def is_owner(self):
        return bool(self.status & ChannelStatus.OWNER)

    @property
    def is_protected(self):
        return bool(self.status & ChannelStatus.PROTECTED)

    @property
    def is_operator(self):
        return bool(self.status & ChannelStatus.OPERATOR)

    @property
    def is_half_operator(self):
        return bool(self.status & ChannelStatus.HALF_OPERATOR)

    @property
    def is_voiced(self):
        return bool(self.status & ChannelStatus.VOICE)

    def grant(self, status):
        self.status = ChannelStatus(self.status | status)

    def revoke(self, status):
        self.status = ChannelStatus(self.status & ~ChannelStatus(status))

    def sort_key(self):
        """ Roster order: highest status first, then nickname without regard to case. """
        return (-int(self.status), self.nickname.as_str().upper())

    def compare_to(self, other):
        if not isinstance(other, ChannelUser):
            return 1
        mine, theirs = self.sort_key(), other.sort_key()
        return (mine > theirs) - (mine < theirs)

    def __lt__(self, other):
        if not isinstance(other, ChannelUser):
            return NotImplemented
        return self.compare_to(other) < 0

    def __repr__(self):
        return '{cls}({nick!r}, {status!r})'.format(cls=self.__class__.__name__, nick=self.nickname, status=self.status)


class Channel:
    """
    The roster and mode state of a channel, kept up to date from NAMES replies and mode changes.
    Users are keyed by nickname, so lookups ignore case.
    """

    def __init__(self, name):
        if not isinstance(name, ChannelName):
            name = ChannelName(name)
        self.name = name
        self.users = {}
        self.modes = None
        self.bans = set()
        self.ban_exceptions = set()
        self.invite_exceptions = set()
        self.public = None

    def _key(self, nickname):
        if nickname is None:
            raise protocol.NullOrEmptyError('nickname')
        if isinstance(nickname, Identifier):
            return nickname
        return Nickname(nickname)


    ## Roster.

    def get_user(self, nickname):
        key = self._key(nickname)
        try:
            return self.users[key]
        except KeyError:
            raise protocol.UserNotFound(nickname) from None

    def add_user(self, nickname, status=ChannelStatus.NONE, username=None, hostname=None):
        user = ChannelUser(nickname, status, username=username, hostname=hostname)
        self._add(user)
        return user

    def _add(self, user):
        if user.nickname in self.users:
            logger.debug('Replacing %s in %s.', user.nickname, self.name)
        else:
            logger.debug('Adding %s to %s.', user.nickname, self.name)
        self.users[user.nickname] = user

    def remove_user(self, nickname):
        user = self.get_user(nickname)
        del self.users[user.nickname]
        logger.debug('Removed %s from %s.', user.nickname, self.name)
        return user

    def rename_user(self, old, new):
        """ Move a user to a new nickname. Raises UserExists if another user already has it. """
        new = new if isinstance(new, Nickname) else Nickname(new)
        existing = self.users.get(new)
        if existing is not None and existing is not self.get_user(old):
            raise protocol.UserExists(new)
        user = self.remove_user(old)
        user.nickname = new
        self.users[user.nickname] = user
        logger.debug('Renamed %s to %s in %s.', old, user.nickname, self.name)
        return user

    def update_names(self, names, support=None):
        """
        Add users from a NAMES reply (or any iterable of NAMES entries).
        Status prefixes are resolved through `support` (a ServerSupport) when given.
        """
        channel = getattr(names, 'channel', None)
        if channel is not None and channel != self.name:
            logger.debug('Ignoring NAMES reply for %s in %s.', channel, self.name)
            return

        public = getattr(names, 'public', None)
        if public is not None:
            self.public = public

        for entry in names:
            status = support.status_for_prefixes(entry.prefixes) if support is not None else entry.status
            self._add(ChannelUser.from_entry(entry, status))

    def roster(self):
        """ All users, sorted by status and then nickname. """
        return sorted(self.users.values(), key=ChannelUser.sort_key)

    def find_users(self, value):
        """ Users whose nickname contains `value`, ignoring case. In roster order. """
        return [ user for user in self.roster() if user.nickname.contains(value) ]


    ## Modes.

    def apply_modes(self, modes, support=None):
        """
        Process a channel mode change.
        Status modes update the targeted users, list modes update the ban/exception lists,
        and all other modes are folded into the channel's active modes.
        Nothing changes if any mode in the change can not be applied.
        """
        if support is not None:
            status_modes = support.status_modes
        else:
            status_modes = DEFAULT_STATUS_MODES

        lists = {
            rfc1459.BAN_MODE: self.bans,
            rfc1459.BAN_EXCEPT_MODE: self.ban_exceptions,
            rfc1459.INVITE_EXCEPT_MODE: self.invite_exceptions
        }

        # Resolve everything first, so a bad mode leaves the channel untouched.
        statuses = []
        entries = []
        others = []
        for mode in modes:
            if mode.char in status_modes and mode.char in MODE_STATUSES:
                if mode.parameter is None:
                    raise protocol.FormatError('Status mode without target: {}{}'.format(mode.sign, mode.char), str(modes))
                statuses.append((self.get_user(mode.parameter), mode))
            elif mode.char in lists:
                # Without a parameter this was a list query, not a change.
                if mode.parameter is not None:
                    entries.append(mode)
            else:
                others.append(mode)
        active = ChannelModeString.apply(self.modes, others) if others else self.modes

        for user, mode in statuses:
            if mode.is_added:
                user.grant(MODE_STATUSES[mode.char])
            else:
                user.revoke(MODE_STATUSES[mode.char])
            logger.debug('%s is now %s in %s.', user.nickname, user.status, self.name)

        for mode in entries:
            if mode.is_added:
                lists[mode.char].add(mode.parameter)
            else:
                lists[mode.char].discard(mode.parameter)

        if others:
            self.modes = active
            logger.debug('Modes for %s are now %s.', self.name, self.modes)
