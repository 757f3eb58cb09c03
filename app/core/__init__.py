"""Core configuration, database, security and errors."""
