"""
Pydantic schema definitions for API payloads.

Response envelopes use camelCase keys on the wire (``requestId``,
``totalRequests``) while the Python attributes stay snake_case.
"""
