"""
Endpoint subpackage.

Each module defines an ``APIRouter`` for one area of the portal
(courses, tours, the two registration kinds and the admin panel).
"""
