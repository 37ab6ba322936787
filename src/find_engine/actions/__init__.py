"""Find and replace commands plus the helpers they share."""

from .base import ReplaceCommand, SearchCommand
from .find import FindIncrementalCommand, FindNextCommand, FindPreviousCommand
from .registry import COMMANDS, UnknownCommandError, create_command
from .replace import ReplaceAllCommand, ReplaceAndFindCommand
from .service import SearchService, Substitution

__all__ = [
    "COMMANDS",
    "FindIncrementalCommand",
    "FindNextCommand",
    "FindPreviousCommand",
    "ReplaceAllCommand",
    "ReplaceAndFindCommand",
    "ReplaceCommand",
    "SearchCommand",
    "SearchService",
    "Substitution",
    "UnknownCommandError",
    "create_command",
]
