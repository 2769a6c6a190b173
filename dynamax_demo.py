# dynamax_demo.py
"""
Command-line demo of the party domain, no HTTP involved.

Prints the first party member, its first normal move and its first
dynamax move. Exits with status 1 if dynamaxing fails.
"""
import sys
from typing import Tuple

from errors import UnknownMoveType
from party import PARTY, Pokemon


def main(party: Tuple[Pokemon, ...] = PARTY) -> int:
    venusaur = party[0]
    print("ポケモン:", venusaur.name)

    moves = venusaur.get_moves(dynamax=False)
    print("通常わざ:", moves[0].name)

    try:
        max_moves = venusaur.get_moves(dynamax=True)
    except UnknownMoveType as e:
        print(e)
        return 1
    print("ダイマックスわざ:", max_moves[0].name)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
