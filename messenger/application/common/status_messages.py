"""User-facing messages returned with every operation result."""

USER_ALREADY_EXISTS = "User with this username already exists"
USER_CREATED = "User created successfully"
USER_NOT_FOUND = "User with ID - {user_id} not found"

CHAT_CREATED = "Chat created successfully"
CHATS_RETRIEVED = "Chats successfully retrieved"
CHAT_NOT_FOUND = "Chat with ID - {chat_id} not found"

AUTHOR_NOT_IN_CHAT = "Author with ID - {author_id} in chat with ID - {chat_id} not found"
MESSAGE_CREATED = "Message created successfully"
MESSAGES_RETRIEVED = "Messages successfully retrieved"
