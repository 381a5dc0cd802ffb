"""Transport shapes exchanged between the routes and the catalog services.

Fields left as ``marshmallow.missing`` are absent: schemas skip them on dump.
"""
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from marshmallow import missing


@dataclass
class MovieDTO:
    id: Optional[int] = None
    title: Optional[str] = None
    release_year: Optional[int] = None
    duration: Optional[int] = None
    actor_ids: Optional[list] = field(default_factory=list)
    genre_ids: Optional[list] = field(default_factory=list)
    actors: object = missing
    genres: object = missing


@dataclass
class ActorDTO:
    id: Optional[int] = None
    name: Optional[str] = None
    birth_date: Optional[date] = None


@dataclass
class GenreDTO:
    id: Optional[int] = None
    name: Optional[str] = None
