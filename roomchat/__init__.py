"""Room-based chat building blocks: BBCode styling, client settings, input checks, room bookkeeping, message queues and an event log."""

__version__ = "0.1.0"

__all__ = ["bbcode", "config", "validation", "msgqueue", "rooms", "logger"]