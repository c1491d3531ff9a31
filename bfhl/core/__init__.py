"""Core request handling package.

Architectural role:
    Sits between the HTTP boundary and the numeric kernel / AI subsystem.

Composition:
    - `operations`: closed set of typed operation variants.
    - `classifier`: untyped JSON body -> one typed operation.
    - `numeric`: pure arithmetic functions.
    - `engine`: operation -> result value.
    - `envelope`: uniform response shape.

Determinism and side effects:
    Package import is side-effect free. Everything except the `AI` branch of
    `engine.execute` is pure.
"""
