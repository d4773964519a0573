"""ORM models."""

from models.base import Base
from models.game import Game
from models.team import EXHIBITION_TEAM_TYPE, Team
from models.tournament import Tournament, TournamentHostingTeam

__all__ = [
    "Base",
    "EXHIBITION_TEAM_TYPE",
    "Game",
    "Team",
    "Tournament",
    "TournamentHostingTeam",
]
