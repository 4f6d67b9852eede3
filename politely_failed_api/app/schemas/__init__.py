"""
Pydantic schema definitions for API payloads.

Schemas describe the JSON bodies returned by the HTTP routes.  They
are separated from the domain model in ``models`` so that the wire
representation (e.g. ``messagesLoaded`` in camelCase) does not leak
into the store and service.
"""
