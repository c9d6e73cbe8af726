"""Messenger backend: users, chats and messages over a denormalized document store."""

__version__ = "1.0.0"
