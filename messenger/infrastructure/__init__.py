"""
INFRASTRUCTURE LAYER - Implementations of domain ports

- persistence/ → MongoDB and in-memory DocumentStore adapters
"""
