"""Default roster used as the stand-in database."""

from typing import Iterator, Tuple

from player_streams.models import Player


# (id, name, rank, country), in emission order
DEFAULT_ROSTER: Tuple[Tuple[int, str, int, str], ...] = (
    (1, "Rafael Nadal", 1, "Spain"),
    (2, "Novak Djokovic", 2, "Serbia"),
    (3, "Carlos Alcaraz", 3, "Spain"),
    (4, "Roger Federer", 4, "Switzerland"),
    (5, "Andy Murray", 5, "UK"),
)


def default_roster() -> Iterator[Player]:
    """Yield fresh ``Player`` records in literal order."""
    for player_id, name, rank, country in DEFAULT_ROSTER:
        yield Player(id=player_id, name=name, rank=rank, country=country)
