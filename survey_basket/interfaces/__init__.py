"""
Interface layer package.

FastAPI routers and Pydantic schemas. Routers call use cases and are
the only place where results are translated into HTTP responses.
"""
