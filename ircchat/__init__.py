"""A minimal TCP chat server and client that exchange a single text message."""

__version__ = "0.1.0"
__all__ = ["logmessages", "netutil", "server", "client"]