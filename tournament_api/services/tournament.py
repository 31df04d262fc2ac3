import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from tournament_api.models.tournament import (
    Tournament,
    TournamentStatus,
    stamp_created,
    stamp_updated,
    utcnow,
)
from tournament_api.repositories.tournament import TournamentRepository
from tournament_api.schemas.tournament import TournamentIn

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NotFound:
    tournament_id: int


class TournamentService:
    """Thin business layer between the HTTP routes and the repository.

    Lookups by id return either the record or a ``NotFound`` marker; callers are
    expected to check for it instead of catching an exception. Timestamps and the
    default status are stamped here before every save.
    """

    def __init__(
        self,
        repository: TournamentRepository,
        clock: Callable[[], datetime] = utcnow,
        latency: float = 0.0,
    ):
        self.repository = repository
        self.clock = clock
        self.latency = latency

    def find_all(self) -> list[Tournament]:
        # Simulated slow storage on the full-list path.
        if self.latency > 0:
            time.sleep(self.latency)
        return self.repository.find_all()

    def find_by_id(self, tournament_id: int) -> Tournament | NotFound:
        t = self.repository.find_by_id(tournament_id)
        if t is None:
            logger.debug("Tournament %s not found", tournament_id)
            return NotFound(tournament_id)
        return t

    def create(self, details: TournamentIn) -> Tournament:
        t = Tournament(
            name=details.name,
            game=details.game,
            status=details.status,
            start_date=details.start_date,
            end_date=details.end_date,
            max_participants=details.max_participants,
            current_participants=details.current_participants,
            prize_pool=details.prize_pool,
        )
        stamp_created(t, self.clock())
        t = self.repository.save(t)
        logger.info("Created tournament %s (%s, %s)", t.id, t.game, t.status.value)
        return t

    def update(self, tournament_id: int, details: TournamentIn) -> Tournament | NotFound:
        t = self.find_by_id(tournament_id)
        if isinstance(t, NotFound):
            return t

        # id, created_at and current_participants are left as they are.
        t.name = details.name
        t.game = details.game
        t.status = details.status
        t.start_date = details.start_date
        t.end_date = details.end_date
        t.max_participants = details.max_participants
        t.prize_pool = details.prize_pool

        stamp_updated(t, self.clock())
        t = self.repository.save(t)
        logger.info("Updated tournament %s (status=%s)", t.id, t.status.value)
        return t

    def delete(self, tournament_id: int) -> NotFound | None:
        t = self.find_by_id(tournament_id)
        if isinstance(t, NotFound):
            return t
        self.repository.delete(t)
        logger.info("Deleted tournament %s", tournament_id)
        return None

    def find_by_status(self, status: TournamentStatus) -> list[Tournament]:
        return self.repository.find_by_status(status)

    def find_by_game(self, game: str) -> list[Tournament]:
        return self.repository.find_by_game(game)

    def find_by_status_and_participants_below(
        self, status: TournamentStatus, max_participants: int
    ) -> list[Tournament]:
        return self.repository.find_by_status_and_participants_below(status, max_participants)
