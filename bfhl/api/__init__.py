"""BFHL API adapter package.

Architectural role:
- Defines the external HTTP boundary and the process entrypoint.
- Performs transport-level validation and response shaping.
- Delegates classification and execution to the core layer.
"""
