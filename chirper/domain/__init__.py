"""
Domain layer.

The domain layer contains the core business logic of the application.
It has no dependencies on storage or transport.

This layer contains:
- Entities: Objects with identity and lifecycle
- Value Objects: Immutable objects defined by attributes
- Domain Services: Stateless operations across entities
"""
