"""Input handling: commands, key mapping and input sources.

The game loop reads raw keys from an InputSource and asks the KeyMapper for
the Command they stand for; unmapped keys are simply ignored.
"""

from .actions import Command
from .mapping import KeyMapper
from .providers import ConsoleInput, InputSource, ScriptedInput

__all__ = [
    "Command",
    "ConsoleInput",
    "InputSource",
    "KeyMapper",
    "ScriptedInput",
]
