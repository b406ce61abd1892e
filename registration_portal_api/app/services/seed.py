"""
Default catalogue loaded into a fresh storage repository.

The portal starts with three courses and the three weekly tour slots.
Courses may later be edited or removed through the admin API; tours
are only ever created from this list.
"""

from typing import List

from registration_portal_api.app.schemas.course import CourseCreate
from registration_portal_api.app.schemas.tour import TourCreate


DEFAULT_COURSES: List[CourseCreate] = [
    CourseCreate(
        name="Técnicas de Cocina Profesional",
        description="Aprende las técnicas fundamentales de la cocina profesional con chefs expertos.",
        date="15 Mar 2024",
        capacity=12,
        image_url="https://images.unsplash.com/photo-1556909114-f6e7ad7d3136?ixlib=rb-4.0.3&auto=format&fit=crop&w=400&h=200",
    ),
    CourseCreate(
        name="Marketing Digital Avanzado",
        description="Domina las estrategias más efectivas del marketing digital y redes sociales.",
        date="22 Mar 2024",
        capacity=20,
        image_url="https://images.unsplash.com/photo-1460925895917-afdab827c52f?ixlib=rb-4.0.3&auto=format&fit=crop&w=400&h=200",
    ),
    CourseCreate(
        name="Fotografía Profesional",
        description="Desarrolla tu ojo artístico y técnicas profesionales de fotografía.",
        date="28 Mar 2024",
        capacity=8,
        image_url="https://images.unsplash.com/photo-1502920917128-1aa500764cbd?ixlib=rb-4.0.3&auto=format&fit=crop&w=400&h=200",
    ),
]

DEFAULT_TOURS: List[TourCreate] = [
    TourCreate(type="weekday", schedule="10:00 - 11:30", description="Visita completa de instalaciones", capacity=15),
    TourCreate(type="saturday", schedule="09:00 - 12:00", description="Visita especializada + taller", capacity=10),
    TourCreate(type="sunday", schedule="11:00 - 12:00", description="Visita familiar", capacity=20),
]
