"""
Read-only snapshots of a session for report generation.

Built by a report repository; nothing here touches the ORM.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .exceptions import InvalidSnapshotError


@dataclass(frozen=True)
class SampleSnapshot:
    sample_id: str
    name: str
    position: int = 1
    code: str = ''
    origin: str = ''
    region: str = ''
    variety: str = ''
    processing_method: str = ''
    roast_level: str = ''
    producer: str = ''
    farm: str = ''
    altitude: Optional[int] = None

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise InvalidSnapshotError("Sample name is required")
        if self.position < 1:
            raise InvalidSnapshotError("Sample position starts at 1")
        object.__setattr__(self, 'sample_id', str(self.sample_id))

    def details(self) -> list[tuple[str, str]]:
        """Label/value pairs for the fields that are filled in."""
        fields = [
            ('Code', self.code),
            ('Origin', self.origin),
            ('Region', self.region),
            ('Variety', self.variety),
            ('Processing Method', self.processing_method),
            ('Roast Level', self.roast_level),
            ('Producer', self.producer),
            ('Farm', self.farm),
            ('Altitude', f'{self.altitude} masl' if self.altitude else ''),
        ]
        return [(label, value) for label, value in fields if value]


@dataclass(frozen=True)
class ParticipantSnapshot:
    user_id: str
    name: str
    role: str = 'JUDGE'

    def __post_init__(self):
        object.__setattr__(self, 'user_id', str(self.user_id))


@dataclass(frozen=True)
class SessionSnapshot:
    """A session with its samples (table order) and participants."""

    session_id: str
    name: str
    status: str
    created_by_name: str = ''
    description: str = ''
    location: str = ''
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    participants: tuple = ()
    samples: tuple = ()

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise InvalidSnapshotError("Session name is required")

        samples = tuple(sorted(self.samples, key=lambda sample: sample.position))
        sample_ids = [sample.sample_id for sample in samples]
        if len(sample_ids) != len(set(sample_ids)):
            raise InvalidSnapshotError("A sample can only appear once per session")

        object.__setattr__(self, 'session_id', str(self.session_id))
        object.__setattr__(self, 'samples', samples)
        object.__setattr__(self, 'participants', tuple(self.participants))
