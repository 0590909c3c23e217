"""
Test Suite
==========

Test suite matching the api_parser package structure.

Test Categories:
- unit: Unit tests for individual components
- integration: Tests running the full resolve, invoke and decode pipeline
"""
