"""
Configuration management.

Loads table I/O settings (encoding, line ending, data directory) from
environment variables and .env files.
"""
