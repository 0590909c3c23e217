"""
Core Business Logic
==================

Core modules for running the external API parser and decoding its output.

Modules:
- errors: Exception hierarchy shared by all components
- executor: Executable resolution, toolchain handling and process invocation
- dsl: Decoding of parser output and the high level parser facade
"""
