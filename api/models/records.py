"""
Canonical record types decoded from the remote artist API
"""
from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(frozen=True)
class Artist:
    id: int = 0
    name: str = ''
    image: str = ''
    members: List[str] = field(default_factory=list)
    creation_date: int = 0
    first_album: str = ''
    # URLs of the artist's sub-documents on the remote API
    locations: str = ''
    concert_dates: str = ''
    relations: str = ''


@dataclass(frozen=True)
class Location:
    id: int = 0
    locations: List[str] = field(default_factory=list)
    dates: str = ''


@dataclass(frozen=True)
class ConcertDate:
    id: int = 0
    dates: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class Relation:
    id: int = 0
    dates_locations: Dict[str, List[str]] = field(default_factory=dict)
