"""
SurveyBasket: poll and authentication API.

Application package root. A modular monolith using hexagonal
architecture (ports & adapters).

Bounded contexts:
    - polls: Poll creation, listing, updating and publishing.
    - auth: User registration and token issuance.

Layers:
    - domain: Entities, ports (ABCs), domain errors.
    - application: Use cases returning Result values, DTOs.
    - infrastructure: SQLAlchemy adapters implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas, dependency wiring.
    - shared: Cross-cutting concerns (results, problems, security, logging).
"""
