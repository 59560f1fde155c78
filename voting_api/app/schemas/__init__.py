"""
Pydantic schema definitions for API payloads.

Each domain (candidates, votes) defines its own Pydantic models for
request and response bodies.
"""
