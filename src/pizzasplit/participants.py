"""
participants.py — Who takes part in an order

Orders and ledgers only ever see a participant's id. Names and other
details live here, looked up by the same id, so nothing in the billing code
depends on how a person is displayed.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Optional

from .ids import IdProvider


@dataclass(frozen=True)
class Participant:
    id: int
    name: str


class ParticipantDirectory:
    """Registers participants and hands out their ids."""

    def __init__(self, id_base: int = 0):
        self._ids = IdProvider(id_base)
        self._participants: dict[int, Participant] = {}

    def register(self, name: str) -> Participant:
        participant = Participant(self._ids.next(), name)
        self._participants[participant.id] = participant
        return participant

    def get(self, participant_id: int) -> Optional[Participant]:
        return self._participants.get(participant_id)

    def name_of(self, participant_id: int) -> str:
        """Name for display; the id itself if the participant is unknown."""
        participant = self._participants.get(participant_id)
        return participant.name if participant else str(participant_id)

    def __iter__(self) -> Iterator[Participant]:
        return iter(list(self._participants.values()))

    def __len__(self) -> int:
        return len(self._participants)
