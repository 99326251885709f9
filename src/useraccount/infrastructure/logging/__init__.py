"""Logging adapters implementing LoggerProtocol."""

from useraccount.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
