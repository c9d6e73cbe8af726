"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  → Write operations (register user, create chat, create message)
- queries/   → Read operations (chats of a user, messages of a chat)
- services/  → Identifier generation
- dto/       → Data Transfer Objects for the HTTP responses
- common/    → Shared interfaces (Command, Query base classes, OperationResult)
- facade.py  → One entry point per operation

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
- Coordinates entities and the document store
"""
