from .tournament import Tournament, TournamentStatus

__all__ = [
    "Tournament",
    "TournamentStatus",
]
