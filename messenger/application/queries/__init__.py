"""
QUERIES - Read operations (CQRS)

Queries retrieve data without modifying state. Each query has:
- Query class: Parameters for the read
- Handler class: Executes the read

Subfolders:
- chats/    → get_chats (a user's chats, most recently active first)
- messages/ → get_messages (a chat's messages, newest first)
"""
