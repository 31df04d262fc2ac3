import enum
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from sqlalchemy import DateTime, Enum, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from tournament_api.db.base import Base


class TournamentStatus(str, enum.Enum):
    # Lifecycle order; transitions are not enforced.
    UPCOMING = "UPCOMING"
    REGISTRATION_OPEN = "REGISTRATION_OPEN"
    REGISTRATION_CLOSED = "REGISTRATION_CLOSED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class Tournament(Base):
    __tablename__ = "tournaments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    game: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    status: Mapped[TournamentStatus] = mapped_column(
        Enum(TournamentStatus, native_enum=False, length=32, name="tournament_status"),
        nullable=False,
        index=True,
    )

    start_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    end_date: Mapped[datetime | None] = mapped_column(DateTime)

    max_participants: Mapped[int | None] = mapped_column(Integer)
    current_participants: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    prize_pool: Mapped[Decimal | None] = mapped_column(Numeric())

    # Naive UTC, stamped explicitly by the service layer (see stamp_created/stamp_updated).
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def stamp_created(tournament: Tournament, now: datetime) -> Tournament:
    """Prepare a brand new record for its first save.

    Sets both timestamps to ``now`` and fills in the defaults a caller may
    leave out: ``UPCOMING`` status and zero current participants.
    """
    tournament.created_at = now
    tournament.updated_at = now
    if tournament.status is None:
        tournament.status = TournamentStatus.UPCOMING
    if tournament.current_participants is None:
        tournament.current_participants = 0
    return tournament


def stamp_updated(tournament: Tournament, now: datetime) -> Tournament:
    """Refresh ``updated_at`` so it strictly advances past its prior value."""
    previous = tournament.updated_at
    if previous is not None and now <= previous:
        now = previous + timedelta(microseconds=1)
    tournament.updated_at = now
    return tournament
