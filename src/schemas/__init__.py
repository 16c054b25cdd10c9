"""HTTP request/response schemas (Pydantic).

Versioned representations live one model per (resource, version); the model
name doubles as the descriptor's representation shape.
"""
