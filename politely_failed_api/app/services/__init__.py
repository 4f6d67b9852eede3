"""
Service layer abstraction.

``MessageStore`` owns loading, validating and caching the message
database; ``MessageService`` is the query surface used by the API
handlers.  Both are constructed by ``create_app`` and shared through
``app.state``.
"""
