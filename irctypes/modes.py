## modes.py
# Channel and client mode changes, and their wire representation.
from . import protocol
from .rfc1459 import protocol as rfc1459

__all__ = [ 'Mode', 'ModeString', 'ChannelModeString', 'ClientModeString',
            'is_channel_mode', 'are_channel_modes', 'is_client_mode' ]


class Mode:
    """
    A single mode character that is either being added or removed, with an optional parameter.
    Modes compare equal when their characters do, regardless of direction or parameter.
    """
    __slots__ = ('_char', '_added', '_parameter')

    def __init__(self, char, is_added=True, parameter=None):
        if not isinstance(char, str) or len(char) != 1 or char.isspace() or char in (rfc1459.ADD_SIGIL, rfc1459.REMOVE_SIGIL):
            raise protocol.FormatError('Invalid mode character: {!r}'.format(char), char)
        self._char = char
        self._added = bool(is_added)
        self._parameter = parameter

    @property
    def char(self):
        return self._char

    @property
    def is_added(self):
        return self._added

    @property
    def parameter(self):
        return self._parameter

    @property
    def sign(self):
        """ The sigil this mode is prefixed with on the wire. """
        return rfc1459.ADD_SIGIL if self._added else rfc1459.REMOVE_SIGIL

    def equals(self, other):
        """ Whether `other` is the same mode character. Accepts another Mode or a bare character. """
        if isinstance(other, Mode):
            return self._char == other._char
        if isinstance(other, str):
            return self._char == other
        return False

    def compare_to(self, other):
        """ Order by mode character. Returns -1, 0 or 1; anything that is not a mode sorts before us. """
        if not isinstance(other, Mode):
            return 1
        if self._char < other._char:
            return -1
        if self._char > other._char:
            return 1
        return 0

    def __eq__(self, other):
        if not isinstance(other, (Mode, str)):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other):
        if not isinstance(other, (Mode, str)):
            return NotImplemented
        return not self.equals(other)

    def __lt__(self, other):
        if not isinstance(other, Mode):
            return NotImplemented
        return self.compare_to(other) < 0

    def __gt__(self, other):
        if not isinstance(other, Mode):
            return NotImplemented
        return self.compare_to(other) > 0

    def __hash__(self):
        return hash(self._char)

    def __str__(self):
        return self._char

    def __repr__(self):
        if self._parameter is None:
            return '{cls}({char!r}, {added})'.format(cls=self.__class__.__name__, char=self._char, added=self._added)
        return '{cls}({char!r}, {added}, {param!r})'.format(
            cls=self.__class__.__name__, char=self._char, added=self._added, param=self._parameter)


class ModeString:
    """
    An immutable, ordered, non-empty collection of mode changes, as sent in a single MODE command.
    Subclasses decide which modes may occur more than once through REPEATABLE_MODES.
    """
    __slots__ = ('_modes', '_string')
    REPEATABLE_MODES = frozenset()
    # Modes that take a spare parameter, even if the server did not say they always do.
    TARGETED_MODES = frozenset()

    def __init__(self, modes):
        if modes is None:
            raise protocol.NullOrEmptyError('modes')
        if isinstance(modes, Mode):
            modes = (modes,)

        collected = []
        for mode in modes:
            if not isinstance(mode, Mode):
                raise TypeError('Mode strings can only contain modes, not {}'.format(type(mode).__name__))
            if self._is_duplicate(mode, collected):
                raise protocol.DuplicateModeError(mode)
            collected.append(mode)

        if not collected:
            raise protocol.NullOrEmptyError('modes')
        self._modes = tuple(collected)
        self._string = None

    def _is_duplicate(self, mode, modes):
        return mode.char not in self.REPEATABLE_MODES and mode in modes


    ## Parsing and construction.

    @classmethod
    def parse(cls, text, always_parameter_modes='', add_parameter_modes=''):
        """
        Parse a mode change such as '+ov-b alice bob *!*@host' into a mode string.
        Modes in `always_parameter_modes` take a parameter both when added and removed,
        modes in `add_parameter_modes` only take one when added.
        Modes in TARGETED_MODES that are in neither set only take a parameter when there are more left
        than the modes after them require.
        Parameters are consumed in the order their modes appear.
        """
        if text is None:
            raise protocol.NullOrEmptyError('text')
        if not text.strip():
            raise protocol.FormatError('Empty mode string.', text)

        flags, *params = rfc1459.ARGUMENT_SEPARATOR.split(text.strip())
        always = set(always_parameter_modes or '')
        on_add = always | set(add_parameter_modes or '')

        # First pass: direction of every mode and whether it requires a parameter.
        scanned = []
        added = True
        for char in flags:
            if char == rfc1459.ADD_SIGIL:
                added = True
            elif char == rfc1459.REMOVE_SIGIL:
                added = False
            else:
                scanned.append((char, added, char in (on_add if added else always)))
        required = sum(1 for _, _, needs in scanned if needs)

        modes = []
        index = 0
        for char, added, needs in scanned:
            parameter = None
            if needs:
                required -= 1
                try:
                    parameter = params[index]
                except IndexError as e:
                    raise protocol.FormatError('Attempted to parse mode with parameter ({s}{mode}) but no parameters left in mode string.'.format(
                        s=rfc1459.ADD_SIGIL if added else rfc1459.REMOVE_SIGIL, mode=char), text) from e
                index += 1
            elif char in cls.TARGETED_MODES and len(params) - index > required:
                parameter = params[index]
                index += 1
            modes.append(Mode(char, added, parameter))

        if not modes:
            raise protocol.FormatError('Mode string does not contain any modes.', text)
        return cls(modes)

    def to_string(self):
        """
        Canonical wire form: all added modes after a single '+', all removed modes after a single '-',
        then the parameters of added modes followed by those of removed modes.
        """
        if self._string is None:
            added = [ mode for mode in self._modes if mode.is_added ]
            removed = [ mode for mode in self._modes if not mode.is_added ]

            flags = ''
            if added:
                flags += rfc1459.ADD_SIGIL + ''.join(mode.char for mode in added)
            if removed:
                flags += rfc1459.REMOVE_SIGIL + ''.join(mode.char for mode in removed)
            params = [ mode.parameter for mode in added + removed if mode.parameter is not None ]

            self._string = ' '.join([ flags ] + params)
        return self._string


    ## Combination.

    @classmethod
    def combine(cls, first, second):
        """ Concatenate two mode strings (or single modes). None acts as the empty mode string. """
        first = cls._coerce(first)
        second = cls._coerce(second)
        if first is None:
            return second
        if second is None:
            return first
        return cls(first._modes + second._modes)

    @classmethod
    def _coerce(cls, value):
        if value is None or isinstance(value, cls):
            return value
        if isinstance(value, Mode):
            return cls(value)
        raise TypeError('Can not combine {} with {}'.format(cls.__name__, type(value).__name__))

    def _combinable(self, other):
        return other is None or isinstance(other, (type(self), Mode))

    def __add__(self, other):
        if not self._combinable(other):
            return NotImplemented
        return type(self).combine(self, other)

    def __radd__(self, other):
        if not self._combinable(other):
            return NotImplemented
        return type(self).combine(other, self)

    def remove(self, start, count=None):
        """
        Return a copy without `count` modes starting at `start`, or without everything from `start` on if no count is given.
        Returns None when no modes would be left.
        """
        length = len(self._modes)
        if start < 0 or start >= length:
            raise protocol.RangeError('start', start)
        if count is None:
            count = length - start
        if count < 0 or count > length - start:
            raise protocol.RangeError('count', count)

        if count == 0:
            return self
        remaining = self._modes[:start] + self._modes[start + count:]
        if not remaining:
            return None
        return type(self)(remaining)

    @classmethod
    def apply(cls, current, change):
        """
        Fold a mode change into the current set of active modes.
        Added modes replace an active mode with the same character (for repeatable modes: the same parameter too),
        removed modes are dropped. Returns the new set, or None if no modes remain active.
        """
        state = list(current) if current is not None else []
        for mode in (change or ()):
            state = [ active for active in state if not cls._replaces(mode, active) ]
            if mode.is_added:
                state.append(mode)

        if not state:
            return None
        return cls(state)

    @classmethod
    def _replaces(cls, mode, active):
        if mode != active:
            return False
        return mode.char not in cls.REPEATABLE_MODES or mode.parameter == active.parameter


    ## Queries.

    @property
    def modes(self):
        return self._modes

    def contains(self, mode):
        """ Whether a mode (or bare mode character) occurs in this mode string. """
        return self.index_of(mode) > -1

    def index_of(self, mode):
        """ Index of the first occurrence of a mode (or bare mode character), or -1. """
        for i, candidate in enumerate(self._modes):
            if candidate == mode:
                return i
        return -1

    def validate(self, supported):
        """ Raise UnsupportedModeError for the first mode whose character is not in `supported`. """
        for mode in self._modes:
            if mode.char not in supported:
                raise protocol.UnsupportedModeError(mode)
        return self

    def __contains__(self, mode):
        return self.contains(mode)

    def __getitem__(self, index):
        if isinstance(index, slice):
            modes = self._modes[index]
            return type(self)(modes) if modes else None
        return self._modes[index]

    def __iter__(self):
        return iter(self._modes)

    def __len__(self):
        return len(self._modes)

    def __eq__(self, other):
        if not isinstance(other, ModeString):
            return NotImplemented
        return type(self) is type(other) and self.to_string() == other.to_string()

    def __ne__(self, other):
        if not isinstance(other, ModeString):
            return NotImplemented
        return not self == other

    def __hash__(self):
        return hash((type(self).__name__, self.to_string()))

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return '<{cls} {str!r}>'.format(cls=self.__class__.__name__, str=self.to_string())


class ChannelModeString(ModeString):
    """ Channel mode changes. Modes that target users or masks (+o, +b, ...) may be repeated. """
    __slots__ = ()
    REPEATABLE_MODES = rfc1459.CHANNEL_USER_MODES
    TARGETED_MODES = rfc1459.CHANNEL_USER_MODES


class ClientModeString(ModeString):
    """ User mode changes for our own client. No mode may be repeated. """
    __slots__ = ()


## Mode alphabets.

def is_channel_mode(char):
    """ Whether a character is a channel mode known to any common server implementation. """
    return char in rfc1459.CHANNEL_MODES

def are_channel_modes(chars):
    """ Whether every character is a known channel mode. """
    return bool(chars) and all(is_channel_mode(char) for char in chars)

def is_client_mode(char):
    """ Whether a character is a user mode known to any common server implementation. """
    return char in rfc1459.CLIENT_MODES
