"""PhishNet Sentinel application package.

Heuristic fraud and phishing scoring behind a FastAPI backend. Subpackages:
- api: FastAPI route definitions
- core: configuration and logging
- services: threat-scoring engine, LLM assessment, evidence reports
- schemas: Pydantic models
"""

__all__ = [
    "api",
    "core",
    "services",
    "schemas",
]

__version__ = "1.0.0"
