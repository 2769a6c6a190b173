# party.py
from enum import Enum
from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field

from errors import UnknownMoveType


class MoveType(str, Enum):
    GRASS = "くさ"
    FIRE = "ほのお"
    WATER = "みず"


# closed table: one max move per dynamaxable type
DYNAMAX_MOVES: Dict[MoveType, str] = {
    MoveType.GRASS: "ダイソウゲン",
    MoveType.FIRE: "ダイバーン",
    MoveType.WATER: "ダイストリーム",
}


class Move(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(alias="Name")
    type: str = Field(alias="Type")   # free text, only MoveType values can dynamax

    def dynamax(self) -> "Move":
        """
        Returns the max move for this move's type. The type itself is kept.
        Raises UnknownMoveType when the type is not in DYNAMAX_MOVES.
        """
        try:
            move_type = MoveType(self.type)
        except ValueError:
            raise UnknownMoveType(self.type) from None
        return Move(name=DYNAMAX_MOVES[move_type], type=self.type)


class Pokemon(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(alias="ID")
    name: str = Field(alias="Name")
    moves: Tuple[Move, ...] = Field(default=(), exclude=True)  # never serialized

    def get_moves(self, dynamax: bool = False) -> Tuple[Move, ...]:
        """
        Plain moves as-is, or every move dynamaxed in order.
        Dynamaxing is all-or-nothing: one unknown type fails the whole call.
        """
        if not dynamax:
            return self.moves
        return tuple(move.dynamax() for move in self.moves)


# the party is built once at import and never changes; lookups are by position
PARTY: Tuple[Pokemon, ...] = (
    Pokemon(id=3, name="フシギバナ", moves=[Move(name="つるのむち", type=MoveType.GRASS.value)]),
    Pokemon(id=6, name="リザードン", moves=[Move(name="かえんほうしゃ", type=MoveType.FIRE.value)]),
    Pokemon(id=9, name="カメックス", moves=[Move(name="みずでっぽう", type=MoveType.WATER.value)]),
)
