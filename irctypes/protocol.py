## protocol.py
# IRC implementation-agnostic errors and helpers.
import re


## Errors.

class Error(Exception):
    """ Base class for all irctypes errors. """
    pass


class NullOrEmptyError(Error, ValueError):
    """ A required value was None or, where that is forbidden, empty. """
    def __init__(self, name):
        super().__init__('Value for {} can not be None or empty.'.format(name))
        self.name = name


class ProtocolViolation(Error):
    """ An error that occurred while parsing or constructing a protocol object that violates the IRC protocol. """
    def __init__(self, msg, message=None):
        super().__init__(msg)
        self.irc_message = message


class FormatError(ProtocolViolation, ValueError):
    """ Input did not follow the expected wire grammar. """
    pass


class DuplicateModeError(ProtocolViolation):
    """ A mode string contained the same non-repeatable mode twice. """
    def __init__(self, mode, message=None):
        super().__init__('Duplicate mode in mode string: {}'.format(mode), message)
        self.mode = mode


class RangeError(Error, IndexError):
    """ An index or count fell outside of the bounds of a sequence. """
    def __init__(self, name, value):
        super().__init__('Value for {} out of range: {}'.format(name, value))
        self.name = name
        self.value = value


class UnsupportedModeError(Error):
    """ A mode is not supported by the server or the known mode alphabet. """
    def __init__(self, mode):
        super().__init__('Unsupported mode: {}'.format(mode))
        self.mode = mode


class UserNotFound(Error):
    def __init__(self, nickname):
        super().__init__('User not found: {}'.format(nickname))
        self.nickname = nickname


class UserExists(Error):
    def __init__(self, nickname):
        super().__init__('User already exists: {}'.format(nickname))
        self.nickname = nickname


## Misc.

def identifierify(name):
    """ Clean up name so it works for a Python identifier. """
    name = name.lower()
    name = re.sub('[^a-z0-9]', '_', name)
    return name
