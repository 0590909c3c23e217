"""
API DSL Module
==============

Decoding of the external parser output and per-file accessors.

Components:
- decoder: JSON decoding, shape validation and batch decoding
- parser: High level facade combining invocation and decoding
"""
