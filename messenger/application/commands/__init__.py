"""
COMMANDS - Write operations (CQRS)

Subfolders:
- users/    → register_user
- chats/    → create_chat
- messages/ → create_message
"""
