from __future__ import annotations

import logging
import random
from typing import Protocol

from flask import current_app

from ..exceptions import InvalidParticipantName, ParticipantNotFound
from ..extensions import db
from ..models import NAME_MAX_LENGTH, Participant
from .matching import generate_matches

logger = logging.getLogger(__name__)


class ParticipantStore(Protocol):
    def list_participants(self) -> list[Participant]: ...

    def add_participant(self, name: str) -> Participant: ...

    def delete_participant(self, participant_id: int) -> Participant: ...


def clean_name(name: str | None) -> str:
    name = (name or "").strip()
    if not name:
        raise InvalidParticipantName("Name is required.")
    if len(name) > NAME_MAX_LENGTH:
        raise InvalidParticipantName(f"Name must be at most {NAME_MAX_LENGTH} characters.")
    return name


class SqlParticipantStore:
    """Participants table through the Flask-SQLAlchemy session. Needs an app context."""

    def list_participants(self) -> list[Participant]:
        return list(db.session.scalars(db.select(Participant).order_by(Participant.id)))

    def add_participant(self, name: str) -> Participant:
        p = Participant(name=clean_name(name))
        db.session.add(p)
        db.session.commit()
        logger.info("Added participant %s (%s)", p.id, p.name)
        return p

    def delete_participant(self, participant_id: int) -> Participant:
        p = db.session.get(Participant, participant_id)
        if p is None:
            raise ParticipantNotFound(participant_id)
        name = p.name
        db.session.delete(p)
        db.session.commit()
        logger.info("Deleted participant %s (%s)", participant_id, name)
        return p


class InMemoryParticipantStore:
    """Dict-backed store for tests and scripts; ids count up from 1."""

    def __init__(self, names=()):
        self._people: dict[int, Participant] = {}
        self._next_id = 1
        for name in names:
            self.add_participant(name)

    def list_participants(self) -> list[Participant]:
        return [self._people[pid] for pid in sorted(self._people)]

    def add_participant(self, name: str) -> Participant:
        p = Participant(id=self._next_id, name=clean_name(name))
        self._people[p.id] = p
        self._next_id += 1
        logger.info("Added participant %s (%s)", p.id, p.name)
        return p

    def delete_participant(self, participant_id: int) -> Participant:
        try:
            p = self._people.pop(participant_id)
        except KeyError:
            raise ParticipantNotFound(participant_id) from None
        logger.info("Deleted participant %s (%s)", participant_id, p.name)
        return p


def generate_for(store: ParticipantStore, rng: random.Random | None = None) -> dict[str, str]:
    return generate_matches(store.list_participants(), rng)


def current_store() -> ParticipantStore:
    """The store registered on the running app by ``create_app``."""
    return current_app.extensions["santapair.store"]
