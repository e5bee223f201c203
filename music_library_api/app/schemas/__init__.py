"""
Pydantic schema definitions for API payloads and snapshot records.
"""
