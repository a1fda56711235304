## names.py
# Case-insensitive identifiers: nicknames, usernames and channel names.
from . import protocol
from .rfc1459 import protocol as rfc1459

__all__ = [ 'Identifier', 'Nickname', 'Username', 'ChannelName' ]


class Identifier:
    """
    An immutable name used on IRC.
    Equality and hashing ignore case, while ordering and string conversion use the name exactly as it was given.
    """
    __slots__ = ('_name', '_folded')

    def __init__(self, name):
        if name is None:
            raise protocol.NullOrEmptyError('name')
        self._name = name
        self._folded = name.upper()

    @classmethod
    def parse(cls, raw):
        """ Convert raw text into an identifier of this type, raising on invalid input. """
        return cls(raw)

    @classmethod
    def try_parse(cls, raw):
        """ Convert raw text into an identifier of this type, or return None if it is not valid. """
        try:
            return cls(raw)
        except protocol.Error:
            return None

    @classmethod
    def is_valid(cls, raw):
        """ Whether raw text would make a valid identifier of this type. """
        return cls.try_parse(raw) is not None

    def as_str(self):
        """ The name in its original case. """
        return self._name

    def equals(self, other):
        """ Whether `other` is an identifier naming the same thing, regardless of case. """
        if other is self:
            return True
        if not isinstance(other, Identifier):
            return False
        return self._folded == other._folded

    def compare_to(self, other):
        """
        Compare ordinally by original case. Returns -1, 0 or 1.
        Anything that is not an identifier (including None) sorts before us.
        """
        if not isinstance(other, Identifier):
            return 1
        if self._name < other._name:
            return -1
        if self._name > other._name:
            return 1
        return 0

    def contains(self, value):
        """ Case-insensitive substring test. """
        if value is None:
            raise protocol.NullOrEmptyError('value')
        return value.upper() in self._folded

    def starts_with(self, value):
        """ Case-insensitive prefix test. """
        if value is None:
            raise protocol.NullOrEmptyError('value')
        return self._folded.startswith(value.upper())

    def __eq__(self, other):
        if not isinstance(other, Identifier):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other):
        if not isinstance(other, Identifier):
            return NotImplemented
        return not self.equals(other)

    def __lt__(self, other):
        if not isinstance(other, Identifier):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other):
        if not isinstance(other, Identifier):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, Identifier):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other):
        if not isinstance(other, Identifier):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __hash__(self):
        return hash(self._folded)

    def __len__(self):
        return len(self._name)

    def __str__(self):
        return self._name

    def __repr__(self):
        return '{cls}({name!r})'.format(cls=self.__class__.__name__, name=self._name)


class Nickname(Identifier):
    """ A nickname, validated against the RFC1459 nickname grammar. """
    __slots__ = ()
    PATTERN = rfc1459.NICKNAME_PATTERN

    def __init__(self, nickname):
        super().__init__(nickname)
        if not self.PATTERN.match(nickname):
            raise protocol.FormatError('Invalid nickname: {!r}'.format(nickname), nickname)


class Username(Identifier):
    """ The user part of a hostmask. May be empty, but never contains whitespace, NUL or @. """
    __slots__ = ()
    PATTERN = rfc1459.USERNAME_PATTERN

    def __init__(self, username):
        super().__init__(username)
        if not self.PATTERN.match(username):
            raise protocol.FormatError('Invalid username: {!r}'.format(username), username)


class ChannelName(Identifier):
    """ A channel name. Names given without a channel type symbol are assumed to be regular (#) channels. """
    __slots__ = ()
    PATTERN = rfc1459.CHANNEL_PATTERN

    def __init__(self, channel):
        if not channel:
            raise protocol.NullOrEmptyError('channel')
        if channel[0] not in rfc1459.CHANNEL_PREFIXES:
            channel = rfc1459.DEFAULT_CHANNEL_PREFIX + channel
        super().__init__(channel)
        if not self.PATTERN.match(channel):
            raise protocol.FormatError('Invalid channel name: {!r}'.format(channel), channel)
