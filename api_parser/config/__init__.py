"""
Configuration Management
=======================

Environment-based configuration using Pydantic Settings.

Components:
- settings: Executable lookup, toolchain and environment settings
- logging: Structured logging configuration
"""
