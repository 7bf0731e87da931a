from .base import InputSource
from .console import ConsoleInput
from .scripted import ScriptedInput

__all__ = ["ConsoleInput", "InputSource", "ScriptedInput"]
