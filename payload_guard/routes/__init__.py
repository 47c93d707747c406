"""
FastAPI routers for the demo API.

Request bodies are decoded through payload_guard.dependencies.strict_body.
"""
