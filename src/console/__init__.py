from .app import ConsoleSession, main

__all__ = ["ConsoleSession", "main"]
