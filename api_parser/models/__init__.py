"""
Data Models
===========

Pydantic models for executable descriptors, invocation outcomes and decoded
parser documents.
"""
