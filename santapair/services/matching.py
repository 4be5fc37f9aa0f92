"""
Random pairing of participants.

Each participant is handed one partner, nobody draws themselves, and no
partner is handed out twice. With an odd head count one participant,
picked at random, sits out and is paired with ``NOBODY``.

The participant sitting out still counts as a partner: anyone may draw
them, and once drawn they are taken like everyone else. Pairings are
one-directional: A drawing B says nothing about whom B draws.
"""
from __future__ import annotations

import logging
import random
from typing import Iterable, NamedTuple

from ..models import Participant

logger = logging.getLogger(__name__)

NOBODY = "Nobody"


class Match(NamedTuple):
    giver: Participant
    # None for the participant sitting out
    receiver: Participant | None


def _draw_round(n: int, rng: random.Random) -> list[int | None] | None:
    """
    One rejection-sampling pass over indices 0..n-1.

    Returns the receiver index for every giver (None for the one sitting
    out), or None when a giver is left with no valid partner.
    """
    used = [False] * n
    receivers: list[int | None] = [None] * n

    odd_one_out = rng.randrange(n) if n % 2 == 1 else -1

    for i in range(n):
        if i == odd_one_out:
            continue

        # Only possible for even n: the last free slot is i itself.
        if not any(j != i and not used[j] for j in range(n)):
            return None

        match = rng.randrange(n)
        while match == i or used[match]:
            match = rng.randrange(n)
        used[match] = True
        receivers[i] = match

    return receivers


def draw_matches(
    participants: Iterable[Participant] | None,
    rng: random.Random | None = None,
) -> list[Match]:
    """Pair up ``participants``; one Match per participant, in input order."""
    people = list(participants or ())
    rng = rng or random.Random()
    n = len(people)

    attempt = 1
    receivers = _draw_round(n, rng)
    while receivers is None:
        logger.debug("Dead end pairing %d participants on attempt %d, redrawing.", n, attempt)
        attempt += 1
        receivers = _draw_round(n, rng)

    logger.debug("Paired %d participants in %d attempt(s).", n, attempt)
    return [
        Match(giver, people[r] if r is not None else None)
        for giver, r in zip(people, receivers)
    ]


def generate_matches(
    participants: Iterable[Participant] | None,
    rng: random.Random | None = None,
) -> dict[str, str]:
    """
    Map each participant's name to their partner's name, or to ``NOBODY``.

    Names are used as keys, so participants sharing a name overwrite each
    other here. Use ``draw_matches`` when that matters.
    """
    matches: dict[str, str] = {}
    for giver, receiver in draw_matches(participants, rng):
        matches[giver.name] = receiver.name if receiver is not None else NOBODY
    return matches
