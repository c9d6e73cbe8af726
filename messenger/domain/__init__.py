"""
DOMAIN LAYER - Users, chats and messages

This layer contains:
- Entities: Business objects with identity (User, Chat, Message)
- Value Objects: Immutable identifier types (UserId, ChatId, MessageId)
- Ports: Interfaces that infrastructure implements (DocumentStore)
- Services: Pure domain logic (clock, ordering rules)
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no FastAPI, pymongo, Pydantic, etc.)
2. NO I/O operations (no database, no HTTP, no file system)
3. Only depends on Python stdlib
"""
