"""
PRESENTATION LAYER - HTTP transport

- api/ → FastAPI routers for users, chats, messages and /metrics
"""
