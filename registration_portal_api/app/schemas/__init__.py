"""
Pydantic schema definitions for API payloads.

Each entity kind (users, courses, tours and the two registration
kinds) defines a read model, an insertable model holding only the
fields a client may supply, and, where the API allows it, a partial
update model.  JSON bodies use camelCase names through aliases while
Python code works with snake_case attributes.
"""
