"""
Service layer abstraction.

Each service encapsulates the business logic for one domain and works
against the ``Store`` handed in by the API layer, so handlers never
touch collections directly.
"""
