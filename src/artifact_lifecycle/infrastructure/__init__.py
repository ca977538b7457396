"""
Infrastructure Layer

Adapters for logging, configuration and the file system.
"""
