"""Header and introduction domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class Header:
    """Hero header copy. The most recent record is the one shown."""

    name: str
    description: str
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)


@dataclass
class Introduction:
    """Introduction copy. The most recent record is the one shown."""

    title: str
    header: str
    description: str
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)
