#!/usr/bin/env python3
"""
main.py

Точка входа Geodesic Y: случайные партии и переигрывание истории.

Использование:
    python main.py                              # 10 случайных партий, base_size=3
    python main.py --base-size 9 --games 100    # другой размер
    python main.py --game "geodesic_y(base_size=5,ansi_color_output=True)"
    python main.py --base-size 4 --history "0, 4, 7"   # переиграть запись
"""

import argparse
import logging
import random
import sys
import time
from dataclasses import dataclass
from typing import List, Optional

from core.game import GameParams, GeodesicYGame, load_game
from core.fast import get_implementation_info
from core.state import GeodesicYState
from core.utils import DEFAULT_BASE_SIZE, PLAYER_NAMES, Player
from utils.error_handling import GeodesicYError, InternalInvariantError
from utils.logging import get_logger, setup_file_logging
from y_io.history import parse_history, replay
from y_io.visualizer import format_rings


@dataclass
class SimulationStats:
    """Итоги серии случайных партий."""
    games: int = 0
    player1_wins: int = 0
    player2_wins: int = 0
    total_moves: int = 0
    undo_checks: int = 0
    time_elapsed: float = 0.0

    @property
    def average_length(self) -> float:
        return self.total_moves / self.games if self.games else 0.0

    def __str__(self) -> str:
        return (
            f"Games: {self.games}, "
            f"P1: {self.player1_wins}, "
            f"P2: {self.player2_wins}, "
            f"Avg length: {self.average_length:.1f}, "
            f"Time: {self.time_elapsed:.3f}s"
        )


def _check_undo(state: GeodesicYState) -> None:
    """Отмена последнего хода и повтор должны дать то же состояние."""
    before = state.clone()
    player, action = state.undo_action()
    state.apply_action(action)
    if (player != before.history()[-1][0]
            or not state.board.same_structure(before.board)
            or state.outcome != before.outcome):
        raise InternalInvariantError(f"Undo/replay mismatch after action {action}")


def play_random_game(game: GeodesicYGame, rng: random.Random,
                     check_undo: bool = False) -> GeodesicYState:
    """
    Играет партию случайными ходами до победы одного из игроков.

    Args:
        game: игра
        rng: генератор случайных чисел
        check_undo: после каждого хода проверять undo + повтор

    Returns:
        Финальное состояние
    """
    state = game.new_initial_state()
    while not state.is_terminal():
        state.apply_action(rng.choice(state.legal_actions()))
        if check_undo:
            _check_undo(state)
    return state


def run_random_games(game: GeodesicYGame, num_games: int, seed: Optional[int] = None,
                     check_undo: bool = False, verbose: bool = False) -> SimulationStats:
    """Серия случайных партий с общей статистикой."""
    logger = get_logger()
    rng = random.Random(seed)
    stats = SimulationStats()

    start = time.time()
    for index in range(num_games):
        state = play_random_game(game, rng, check_undo=check_undo)

        stats.games += 1
        stats.total_moves += state.moves_made
        if check_undo:
            stats.undo_checks += state.moves_made
        if state.outcome == Player.PLAYER1:
            stats.player1_wins += 1
        else:
            stats.player2_wins += 1

        if verbose:
            logger.info(
                f"Game {index + 1}: {PLAYER_NAMES[state.outcome]} wins in {state.moves_made} moves "
                f"[{state.history_str()}]"
            )
            print(state.to_string())
    stats.time_elapsed = time.time() - start
    return stats


def replay_history(game: GeodesicYGame, history: str) -> GeodesicYState:
    """Переигрывает записанную партию."""
    return replay(game.new_initial_state(), parse_history(history))


def build_game(args: argparse.Namespace) -> GeodesicYGame:
    if args.game:
        return load_game(args.game)
    return GeodesicYGame(GameParams(
        base_size=args.base_size,
        ansi_color_output=args.ansi,
        starting_player=args.starting_player,
        starting_occupancy=args.occupancy,
    ))


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description='Geodesic Y connection game',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  python main.py --base-size 9 --games 100
  python main.py --game "geodesic_y(base_size=10,ansi_color_output=True)"
  python main.py --base-size 4 --occupancy "p1=0 p2=3" --starting-player p2
  python main.py --base-size 4 --history "0, 4, 7"
        """
    )
    parser.add_argument(
        '--base-size', '-b', type=int, default=DEFAULT_BASE_SIZE,
        help=f'Размер основания доски (default: {DEFAULT_BASE_SIZE})'
    )
    parser.add_argument(
        '--game', '-g',
        help='Строка игры: geodesic_y(base_size=9,ansi_color_output=True)'
    )
    parser.add_argument('--ansi', action='store_true', help='Цветной вывод')
    parser.add_argument(
        '--starting-player', default='p1', help='Кто ходит первым: p1 или p2'
    )
    parser.add_argument(
        '--occupancy', default=None, help='Стартовая расстановка: p1=0,4 p2=7'
    )
    parser.add_argument('--games', '-n', type=int, default=10, help='Количество партий')
    parser.add_argument('--seed', type=int, default=None, help='Seed генератора')
    parser.add_argument(
        '--check-undo', action='store_true',
        help='Проверять отмену хода после каждого хода'
    )
    parser.add_argument('--history', help='Переиграть историю ходов: "0, 4, 7"')
    parser.add_argument('--rings', action='store_true', help='Показать доску по кольцам')
    parser.add_argument('--log-file', help='Дополнительно писать лог в файл')
    parser.add_argument('--verbose', '-v', action='store_true', help='Подробный вывод')

    args = parser.parse_args(argv)

    logger = get_logger()
    if args.verbose:
        logger.set_level(logging.DEBUG)
    if args.log_file:
        setup_file_logging(args.log_file, logging.DEBUG if args.verbose else logging.INFO)

    try:
        game = build_game(args)
        logger.info(f"🎯 {game.long_name}: {game} ({game.num_distinct_actions()} cells)")
        logger.info(f"🔧 Union-find: {get_implementation_info()}")

        if args.history is not None:
            state = replay_history(game, args.history)
            print(state.to_string())
            if args.rings:
                print(format_rings(game.base_size, state.board.owner, ansi=game.params.ansi_color_output))
            if state.is_terminal():
                print(f"Winner: {PLAYER_NAMES[state.outcome]}, returns={state.returns()}")
            else:
                print(f"To move: {PLAYER_NAMES[state.current_player()]}")
            return 0

        if args.rings:
            print(format_rings(game.base_size, ansi=game.params.ansi_color_output))

        stats = run_random_games(
            game, args.games, seed=args.seed,
            check_undo=args.check_undo, verbose=args.verbose
        )
        logger.info(f"📊 {stats}")
        return 0
    except GeodesicYError as e:
        logger.error(f"❌ {e.__class__.__name__}: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
