"""
Feature modules for the DeWhitt backend.

Each module is self-contained with its own:
- models.py: Pydantic models for data transfer
- exceptions.py: Module-specific exceptions
- repository.py: Supabase queries and row mapping
- service.py: Business logic implementation
- routes.py: FastAPI route handlers
- interfaces.py: Protocol definitions, where other modules depend on the module

Modules depend on each other through the Protocols in interfaces.py,
not through concrete classes.
"""
