"""Party domain model: moves, dynamax table and the static party.

Tests:
    - dynamax maps each known type to its max move and keeps the type
    - unknown types raise UnknownMoveType
    - get_moves(False) is the stored moves; get_moves(True) is all-or-nothing
    - JSON shape uses ID/Name and never exposes moves
"""

import pytest
from pydantic import ValidationError

from errors import UnknownMoveType
from party import DYNAMAX_MOVES, PARTY, Move, MoveType, Pokemon


@pytest.mark.parametrize("move_type, max_move", [
    ("くさ", "ダイソウゲン"),
    ("ほのお", "ダイバーン"),
    ("みず", "ダイストリーム"),
])
def test_dynamax_known_types(move_type, max_move):
    move = Move(name="なにか", type=move_type)
    result = move.dynamax()
    assert result.name == max_move
    assert result.type == move.type


def test_dynamax_table_covers_every_move_type():
    assert set(DYNAMAX_MOVES) == set(MoveType)


def test_dynamax_unknown_type_raises():
    with pytest.raises(UnknownMoveType) as exc_info:
        Move(name="でんきショック", type="でんき").dynamax()
    assert exc_info.value.move_type == "でんき"
    assert exc_info.value.http_status == 500


def test_get_moves_without_dynamax_is_identity():
    for pokemon in PARTY:
        assert pokemon.get_moves(False) is pokemon.moves
        assert pokemon.get_moves() == pokemon.moves


def test_get_moves_dynamax_is_deterministic_and_keeps_types():
    for pokemon in PARTY:
        first = pokemon.get_moves(True)
        assert first == pokemon.get_moves(True)
        assert [m.type for m in first] == [m.type for m in pokemon.moves]


def test_get_moves_dynamax_preserves_order():
    pokemon = Pokemon(id=1, name="テスト", moves=[
        Move(name="a", type="みず"),
        Move(name="b", type="くさ"),
    ])
    assert [m.name for m in pokemon.get_moves(True)] == ["ダイストリーム", "ダイソウゲン"]


def test_get_moves_dynamax_fails_whole_call_on_late_unknown_type():
    pokemon = Pokemon(id=1, name="テスト", moves=[
        Move(name="つるのむち", type="くさ"),
        Move(name="でんきショック", type="でんき"),
    ])
    with pytest.raises(UnknownMoveType):
        pokemon.get_moves(True)
    # the stored moves are untouched
    assert [m.name for m in pokemon.moves] == ["つるのむち", "でんきショック"]


def test_party_contents():
    assert [(p.id, p.name) for p in PARTY] == [
        (3, "フシギバナ"),
        (6, "リザードン"),
        (9, "カメックス"),
    ]
    assert PARTY[0].moves == (Move(name="つるのむち", type="くさ"),)


def test_pokemon_json_shape_hides_moves():
    assert PARTY[1].model_dump(by_alias=True) == {"ID": 6, "Name": "リザードン"}


def test_move_json_shape():
    assert PARTY[2].moves[0].model_dump(by_alias=True) == {"Name": "みずでっぽう", "Type": "みず"}


def test_models_are_frozen():
    with pytest.raises(ValidationError):
        PARTY[0].name = "ほかの"
