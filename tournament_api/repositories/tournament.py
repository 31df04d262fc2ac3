from sqlalchemy import select
from sqlalchemy.orm import Session

from tournament_api.models.tournament import Tournament, TournamentStatus


class TournamentRepository:
    """Storage and lookup of tournament rows over a single SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> list[Tournament]:
        return list(self.db.execute(select(Tournament).order_by(Tournament.id)).scalars().all())

    def find_by_id(self, tournament_id: int) -> Tournament | None:
        return self.db.get(Tournament, tournament_id)

    def find_by_status(self, status: TournamentStatus) -> list[Tournament]:
        return list(
            self.db.execute(
                select(Tournament).where(Tournament.status == status).order_by(Tournament.id)
            ).scalars().all()
        )

    def find_by_game(self, game: str) -> list[Tournament]:
        return list(
            self.db.execute(
                select(Tournament).where(Tournament.game == game).order_by(Tournament.id)
            ).scalars().all()
        )

    def find_by_status_and_participants_below(
        self, status: TournamentStatus, max_participants: int
    ) -> list[Tournament]:
        # Compares against the caller's bound, not each row's own max_participants.
        return list(
            self.db.execute(
                select(Tournament)
                .where(
                    Tournament.status == status,
                    Tournament.current_participants < max_participants,
                )
                .order_by(Tournament.id)
            ).scalars().all()
        )

    def save(self, tournament: Tournament) -> Tournament:
        if tournament.id is None:
            self.db.add(tournament)
        else:
            # Rows loaded elsewhere (or built with a known id) overwrite the stored row.
            tournament = self.db.merge(tournament)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(tournament)
        return tournament

    def delete(self, tournament: Tournament) -> None:
        self.db.delete(tournament)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
