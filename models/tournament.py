from pydantic import Field
from typing import List, Optional

from .base import BaseGolfModel
from .hole import Gender
from .round import Round
from .scorecard import ScoreCard


class Player(BaseGolfModel):
    """A registered player and their saved scorecards."""
    user_id: str
    player_name: Optional[str] = None
    division: Optional[str] = None  # division id
    score_cards: List[ScoreCard] = Field(default_factory=list)

    def get_score_card(self, round_id: str) -> Optional[ScoreCard]:
        for card in self.score_cards:
            if card.round_id == round_id:
                return card
        return None


class Division(BaseGolfModel):
    """A competitive division with its own rounds."""
    id: Optional[str] = None
    name: str
    gender: Gender = Gender.MENS
    rounds: List[Round] = Field(default_factory=list)
    # Older tournaments stored players under each division.
    players: List[Player] = Field(default_factory=list)

    def get_round(self, round_label: str) -> Optional[Round]:
        """Look up a round by its label ("R1", "R2", ...)."""
        index = round_index(round_label)
        if index is None or index >= len(self.rounds):
            return None
        return self.rounds[index]


class Tournament(BaseGolfModel):
    id: Optional[str] = None
    name: Optional[str] = None
    divisions: List[Division] = Field(default_factory=list)
    players: List[Player] = Field(default_factory=list)

    def find_division(self, key: Optional[str]) -> Optional[Division]:
        """Find a division by id or name."""
        if key is None:
            return None
        for division in self.divisions:
            if division.id == key or division.name == key:
                return division
        return None

    def find_player(self, user_id: str) -> Optional[Player]:
        """Tournament-level players first, then the legacy division-level lists."""
        for player in self.players:
            if player.user_id == user_id:
                return player
        for division in self.divisions:
            for player in division.players:
                if player.user_id == user_id:
                    return player
        return None

    def division_of(self, user_id: str) -> Optional[Division]:
        """The division a player belongs to."""
        player = self.find_player(user_id)
        if player is not None and player.division:
            division = self.find_division(player.division)
            if division is not None:
                return division
        for division in self.divisions:
            if any(p.user_id == user_id for p in division.players):
                return division
        return None


def round_index(round_label: str) -> Optional[int]:
    """Zero-based index of a round label such as "R2"."""
    if not round_label or not round_label.startswith("R"):
        return None
    try:
        number = int(round_label[1:])
    except ValueError:
        return None
    return number - 1 if number >= 1 else None
