"""DynamoDB client examples: list, describe, get, put and query."""

__version__ = "0.1.0"
