"""
HTTP layer.

``router`` aggregates the endpoint modules; ``deps`` exposes the
dependencies that hand each request the service owned by its app.
"""
