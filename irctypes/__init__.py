from . import protocol, names, modes, namelist, models, isupport

from .protocol import Error, NullOrEmptyError, ProtocolViolation, FormatError, DuplicateModeError, RangeError, \
    UnsupportedModeError, UserNotFound, UserExists
from .names import Identifier, Nickname, Username, ChannelName
from .modes import Mode, ModeString, ChannelModeString, ClientModeString
from .namelist import NameListEntry, NameReply
from .models import ChannelStatus, ChannelUser, Channel
from .isupport import ServerSupport

__name__ = 'irctypes'
__version__ = '0.1.0'
__version_info__ = (0, 1, 0)
__license__ = 'BSD'
