"""
Pydantic models for courses.

``CourseCreate`` is the insertable shape, ``CourseRead`` adds the
repository‑assigned ``id`` and ``CourseUpdate`` carries a partial set
of fields for ``PATCH`` requests.  ``date`` is free text as displayed
in the catalogue (e.g. ``"15 Mar 2024"``).  Capacity is informative
only; registrations are not counted against it.
"""

from typing import Optional

from pydantic import Field

from .base import Capacity, CamelModel, RequiredStr


class CourseBase(CamelModel):
    name: RequiredStr = Field(..., examples=["Fotografía Profesional"])
    description: RequiredStr = Field(..., examples=["Desarrolla tu ojo artístico."])
    date: RequiredStr = Field(..., examples=["28 Mar 2024"])
    capacity: Capacity = Field(..., examples=[8])
    image_url: RequiredStr = Field(..., examples=["https://images.example.com/photo.jpg"])


class CourseCreate(CourseBase):
    """Schema for creating a course."""
    pass


class CourseRead(CourseBase):
    """Schema for reading a course from the API."""

    id: int


class CourseUpdate(CamelModel):
    """Schema for updating a course.

    All fields are optional; only provided fields will be updated.
    """

    name: Optional[RequiredStr] = None
    description: Optional[RequiredStr] = None
    date: Optional[RequiredStr] = None
    capacity: Optional[Capacity] = None
    image_url: Optional[RequiredStr] = None
