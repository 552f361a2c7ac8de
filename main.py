#!/usr/bin/env python3
"""
main.py

Точка входа: текстовая игра в Peg Solitaire.

Использование:
    python main.py                          # английская доска, игрок
    python main.py --board diamond          # доска из каталога
    python main.py --layout my_board.txt    # своя доска из файла
    python main.py --mode computer --seed 7 # автоигра
    python main.py --list                   # список досок
"""

import sys
import time
import random
import logging
import argparse
from typing import Dict, Optional

from core.engine import MoveOutcome
from core.board import CellState
from core.utils import NOTATION_COLUMNS, Coordinate, str_to_coord
from game import Game, new_game
from peg_io.layouts import DEFAULT_LAYOUT, get_layout, list_layouts
from peg_io.visualizer import Highlight, display_board, format_history, select_highlights
from utils.error_handling import EngineError, IllegalMoveError, MalformedLayoutError
from utils.logging import get_logger, setup_file_logging

HELP_TEXT = """Команды:
  C4        выбрать колышек / прыгнуть выбранным в пустую клетку
  B4 D4     сделать ход сразу
  undo      отменить последний ход
  hint      сделать случайный допустимый ход
  restart   начать заново
  history   показать сыгранные ходы
  quit      выход"""


def describe_result(pegs_remaining: int) -> str:
    """Итог терминальной позиции."""
    if pegs_remaining == 1:
        return "🏆 Победа! Остался один колышек."
    return f"❌ Ходов больше нет. Осталось колышков: {pegs_remaining}"


def format_counters(game: Game) -> str:
    moves_made, pegs_remaining = game.counters()
    return f"Ходов: {moves_made}  Колышков: {pegs_remaining}"


class TextFrontend:
    """
    Режим «игрок»: разбор команд, подсветка выбора, вывод доски.

    Выбранный колышек и его возможные цели — собственная таблица
    фронтенда, движок о них не знает.
    """

    def __init__(self, game: Game):
        self.game = game
        self.selected: Optional[Coordinate] = None
        self.highlights: Dict[Coordinate, Highlight] = {}

    def render(self) -> str:
        return f"{display_board(self.game.board, self.highlights)}\n{format_counters(self.game)}"

    def clear_selection(self):
        self.selected = None
        self.highlights = {}

    def handle_command(self, command: str) -> bool:
        """
        Выполняет одну команду.

        Returns:
            False, если игру нужно завершить
        """
        parts = command.replace('-', ' ').split()
        if not parts:
            return True
        word = parts[0].lower()

        if word in ('quit', 'exit', 'q'):
            return False
        if word == 'help':
            print(HELP_TEXT)
        elif word == 'undo':
            self.clear_selection()
            if self.game.undo() is None:
                print("Нечего отменять")
            print(self.render())
        elif word == 'hint':
            self.clear_selection()
            move = self.game.random_legal_move()
            if move is None:
                print("Ходов нет")
            else:
                self._move(*move)
        elif word == 'restart':
            self.clear_selection()
            self.game.restart()
            print(self.render())
        elif word == 'history':
            print(format_history(self.game.engine.history))
        else:
            try:
                coords = [str_to_coord(p) for p in parts[:2]]
            except ValueError as e:
                print(f"❌ {e}")
                return True
            if len(coords) == 2:
                self.clear_selection()
                self._move(coords[0], coords[1])
            else:
                self._click(coords[0])
        return True

    def _click(self, coord: Coordinate):
        state = self.game.board.get(coord)
        if state is None:
            print(f"❌ Клетки {coord} нет на доске")
        elif state is CellState.PEG:
            self.selected = coord
            self.highlights = select_highlights(coord, self.game.legal_destinations(coord))
            print(self.render())
        elif self.selected is not None:
            start = self.selected
            self.clear_selection()
            self._move(start, coord)
        else:
            print("Сначала выберите колышек")

    def _move(self, start: Coordinate, end: Coordinate) -> Optional[MoveOutcome]:
        try:
            outcome = self.game.apply_move(start, end)
        except IllegalMoveError as e:
            print(f"❌ {e}")
            return None
        print(f"Ход {outcome.move}")
        print(self.render())
        if outcome.is_terminal:
            print(describe_result(outcome.pegs_remaining))
        return outcome


def play_user(game: Game, input_func=None) -> int:
    """Интерактивная игра; завершается по quit или EOF."""
    input_func = input_func or input
    frontend = TextFrontend(game)
    print(frontend.render())
    print("Введите help для списка команд")
    while True:
        try:
            command = input_func("> ")
        except EOFError:
            break
        if not frontend.handle_command(command):
            break
    return 0


def play_computer(game: Game, delay: float = 0.0, max_moves: Optional[int] = None) -> int:
    """Автоигра случайными ходами с выводом каждой позиции."""
    print(display_board(game.board))

    def on_move(outcome: MoveOutcome):
        print(f"\nХод {outcome.moves_made}: {outcome.move}")
        print(display_board(game.board))
        if delay > 0:
            time.sleep(delay)

    stats = game.autoplay(max_moves=max_moves, on_move=on_move)
    print(f"\n{format_counters(game)}")
    if stats.finished:
        print(describe_result(stats.pegs_remaining))
    print(f"📊 Статистика: {stats}")
    return 0


def load_layout(args) -> list:
    if args.layout:
        with open(args.layout, 'r', encoding='utf-8-sig') as f:
            return f.read().splitlines()
    return get_layout(args.board)


def check_notation(game: Game) -> None:
    """
    Проверяет, что каждую клетку можно назвать в нотации A1.

    Raises:
        MalformedLayoutError: если у доски больше NOTATION_COLUMNS столбцов
    """
    widest = max((coord.col for coord in game.board), default=-1)
    if widest >= NOTATION_COLUMNS:
        raise MalformedLayoutError(
            f"Доска шире {NOTATION_COLUMNS} столбцов: клетки после Z не адресуются"
        )


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description='Peg Solitaire',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  python main.py --board french
  python main.py --mode computer --delay 0.5
  python main.py --layout board.txt
        """
    )
    parser.add_argument('--board', '-b', default=DEFAULT_LAYOUT,
                        help=f'Доска из каталога (default: {DEFAULT_LAYOUT})')
    parser.add_argument('--layout', help='Файл с описанием доски')
    parser.add_argument('--mode', '-m', choices=['user', 'computer'], default='user',
                        help='Режим игры (default: user)')
    parser.add_argument('--seed', type=int, help='Seed для случайных ходов')
    parser.add_argument('--delay', type=float, default=0.0,
                        help='Пауза между ходами в автоигре, секунды')
    parser.add_argument('--max-moves', type=int, help='Ограничение числа ходов в автоигре')
    parser.add_argument('--verbose', '-v', action='store_true', help='Отладочный лог')
    parser.add_argument('--log-file', help='Писать лог в файл')
    parser.add_argument('--list', action='store_true', help='Показать доступные доски')

    args = parser.parse_args(argv)

    logger = get_logger()
    if args.verbose:
        logger.set_level(logging.DEBUG)
    if args.log_file:
        setup_file_logging(args.log_file)

    if args.list:
        for name in list_layouts():
            print(name)
        return 0

    try:
        game = new_game(load_layout(args), random.Random(args.seed))
        check_notation(game)
    except (EngineError, OSError) as e:
        logger.error(f"Не удалось загрузить доску: {e}")
        print(f"❌ Ошибка: {e}")
        return 1

    if args.mode == 'computer':
        return play_computer(game, args.delay, args.max_moves)
    return play_user(game)


if __name__ == "__main__":
    sys.exit(main())
