"""
Executor Module
===============

Locating, building and running the external API parser executable.

Components:
- platform: Host OS and CPU detection
- toolchain: Go toolchain probing and compilation
- resolver: Ordered executable lookup
- invoker: Subprocess invocation and batch execution
"""
