from .console import ConsoleShell

__all__ = ["ConsoleShell"]
