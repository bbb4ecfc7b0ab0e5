import argparse

from py_n_in_a_row.board import DEFAULT_DIMENSION, MAX_DIMENSION, MIN_DIMENSION, PlayerSymbol
from py_n_in_a_row.exception import ConfigurationError
from py_n_in_a_row.factories import create_game


def main(argv: list[str] | None = None) -> None:
    parser, args = _parse_args(argv)

    human_symbol: PlayerSymbol = "O" if args.player_uses_o else "X"
    try:
        _game_engine, ui = create_game(args.dimension, human_symbol, args.ui, computer_begins=args.computer_begins)
    except ConfigurationError as e:
        parser.error(str(e))

    ui.run()


def _parse_args(argv: list[str] | None = None) -> tuple[argparse.ArgumentParser, argparse.Namespace]:
    parser = argparse.ArgumentParser(prog="py_n_in_a_row", description="N-in-a-row against the computer.")

    parser.add_argument(
        "-d",
        dest="dimension",
        metavar="N",
        type=int,
        default=DEFAULT_DIMENSION,
        help=f"board dimension, {MIN_DIMENSION} to {MAX_DIMENSION} (default: {DEFAULT_DIMENSION})",
    )
    parser.add_argument("-c", dest="computer_begins", action="store_true", help="computer has the first move")
    parser.add_argument(
        "-o",
        dest="player_uses_o",
        action="store_true",
        help="player uses O instead of X (which is the default)",
    )
    parser.add_argument("--ui", choices=("terminal", "pygame"), default="terminal")

    args = parser.parse_args(argv)
    return parser, args


if __name__ == "__main__":
    main()
