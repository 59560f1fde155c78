"""
Service layer abstraction.

Each service encapsulates the business rules for a domain.  Services
receive their stores through the constructor, so the in‑memory
repositories used here can be swapped for durable ones without
changing the services or the API handlers.
"""
