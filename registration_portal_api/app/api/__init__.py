"""
HTTP route layer.

``router.py`` aggregates the domain routers defined in ``endpoints``
under the ``/api`` prefix.  Handlers validate input with the pydantic
schemas, call the storage repository obtained through
``deps.get_storage`` and map "not found" results to HTTP 404.
"""
