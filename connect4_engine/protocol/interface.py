"""
Text Protocol Implementation

This module implements a line-based command protocol for driving the engine
from another program (a GUI, a match runner, a test harness). Commands are
read from stdin and answers are written to stdout, one per line.

Commands Supported:
    - hello: Identify engine and list options
    - isready: Synchronization check
    - newgame: Start new game (clears the transposition table)
    - position: Set board position and side to move
    - setoption: Change search algorithm or depth
    - go: Search and report the best column
    - quit: Shutdown engine

Searches run synchronously on the command loop: 'go' answers before the
next command is read.

Protocol Flow:
    client → "hello"
    engine → "id name connect4-engine 0.1.0"
    engine → "option name Algorithm type combo default alphabeta ..."
    engine → "hellook"
    client → "position startpos moves 3 3"
    client → "go depth 6"
    engine → "info depth 6 score 7 nodes 5321 time 40 algorithm alphabeta"
    engine → "bestmove 2"
"""

import logging
import sys
import time
from pathlib import Path
from typing import List, Optional, Tuple

from connect4_engine import __version__
from connect4_engine.board.representation import (
    Board,
    Cell,
    CELL_TO_SYMBOL,
    SYMBOL_TO_CELL,
    opponent,
)
from connect4_engine.board.rules import apply_move, is_terminal
from connect4_engine.config import EngineConfig
from connect4_engine.evaluation.base import Evaluator
from connect4_engine.search.selector import Algorithm, SearchSession, validate_depth


def setup_logger(log_file: Optional[Path] = None, debug: bool = True):
    """
    Setup file-based logger for protocol debugging.

    Args:
        log_file: Path of the log file (overwritten on start). None
                  disables logging output.
        debug: If True, log at DEBUG level; otherwise INFO level

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger("connect4_engine")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    logger.handlers.clear()

    if log_file is None:
        logger.addHandler(logging.NullHandler())
        return logger

    log_file = Path(log_file)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(log_file, mode='w')
    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


def parse_turn(token: str) -> Cell:
    """
    Parse a side-to-move token ('x' or 'o', any case).

    Raises:
        ValueError: If the token names no player
    """
    cell = SYMBOL_TO_CELL.get(token.upper())
    if cell is None or cell == Cell.EMPTY:
        raise ValueError(f"Invalid turn: {token}")
    return cell


def infer_turn(board: Board) -> Cell:
    """Side to move for a board given without one: A on equal counts, else the side behind."""
    if board.count(Cell.PLAYER_A) <= board.count(Cell.PLAYER_B):
        return Cell.PLAYER_A
    return Cell.PLAYER_B


class ProtocolEngine:
    """
    Text protocol engine interface.

    This class handles all protocol communication and coordinates the
    search session with the current game state.

    Attributes:
        board: Current position
        to_move: Player to move in the current position
        session: Search session (evaluator and transposition table)
        algorithm: Search strategy used by 'go'
        depth: Default search depth used by 'go'

    Methods:
        run: Main command loop
        handle_hello: Respond to 'hello' command
        handle_isready: Respond to 'isready' command
        handle_newgame: Reset for a new game
        handle_position: Set board position
        handle_setoption: Change search settings
        handle_go: Search and report the best column
        handle_quit: Shutdown engine
    """

    def __init__(self, config: Optional[EngineConfig] = None, evaluator: Optional[Evaluator] = None):
        """
        Initialize protocol engine.

        Args:
            config: Engine configuration (default: EngineConfig())
            evaluator: Position evaluator (default: WindowEvaluator)
        """
        self.config = config if config else EngineConfig()

        self.board = Board()
        self.to_move = Cell.PLAYER_A
        self.session = SearchSession(evaluator=evaluator, tt_max_size=self.config.tt_max_size)
        self.algorithm = self.config.algorithm
        self.depth = self.config.depth

        # Engine info
        self.name = "connect4-engine"
        self.version = __version__

        self.logger = setup_logger(self.config.log_file, debug=self.config.debug)
        self.logger.info("=== connect4-engine started ===")
        self.logger.info(f"Log file: {self.config.log_file}")
        self.logger.debug(f"Config: {self.config!r}")

    def run(self):
        """
        Main command loop.

        Listens for commands on stdin and responds on stdout.
        Runs until 'quit' command or end of input.
        """
        while True:
            try:
                command = input().strip()

                if not command:
                    continue

                self.logger.debug(f">>> {command}")

                tokens = command.split()
                cmd = tokens[0].lower()

                if cmd == "hello":
                    self.handle_hello()

                elif cmd == "isready":
                    self.handle_isready()

                elif cmd == "newgame":
                    self.handle_newgame()

                elif cmd == "position":
                    self.handle_position(tokens)

                elif cmd == "setoption":
                    self.handle_setoption(tokens)

                elif cmd == "go":
                    self.handle_go(tokens)

                elif cmd == "quit":
                    self.handle_quit()
                    break

                else:
                    self.logger.debug(f"Unknown command ignored: {command}")

            except EOFError:
                self.logger.info("EOF received, shutting down")
                break
            except Exception as e:
                self.logger.error(f"Command error: {e}", exc_info=True)
                print(f"# Error: {e}", file=sys.stderr)

    def _send(self, line: str):
        print(line)
        sys.stdout.flush()
        self.logger.debug(f"<<< {line}")

    def _report_error(self, message: str):
        self.logger.error(message)
        print(f"# {message}", file=sys.stderr)

    def handle_hello(self):
        """
        Handle 'hello' command - identify engine.

        Response:
            id name connect4-engine 0.1.0
            option name Algorithm type combo default alphabeta var ...
            option name Depth type spin default 5 min 1 max 42
            hellook
        """
        self.logger.info("Handling: hello")

        choices = " ".join(f"var {algorithm.value}" for algorithm in Algorithm)

        self._send(f"id name {self.name} {self.version}")
        self._send(f"option name Algorithm type combo default {self.algorithm.value} {choices}")
        self._send(f"option name Depth type spin default {self.depth} min 1 max 42")
        self._send("hellook")

    def handle_isready(self):
        """
        Handle 'isready' command - synchronization.

        Response:
            readyok
        """
        self.logger.info("Handling: isready")
        self._send("readyok")

    def handle_newgame(self):
        """Handle 'newgame' command - reset board and transposition table."""
        self.logger.info("Handling: newgame - resetting board and transposition table")

        self.board = Board()
        self.to_move = Cell.PLAYER_A
        self.session.reset()

    def _parse_position(self, tokens: List[str]) -> Tuple[Board, Cell]:
        """
        Build the position described by a 'position' command.

        Raises:
            ValueError: On a malformed command, bad board text, bad turn,
                        or an illegal move
        """
        if len(tokens) < 2:
            raise ValueError("Position command with insufficient arguments")

        if tokens[1] == "startpos":
            board = Board()
            to_move = Cell.PLAYER_A
            index = 2
        elif tokens[1] == "board":
            if len(tokens) < 3:
                raise ValueError("Missing board text")
            board = Board.from_string(tokens[2])
            to_move = infer_turn(board)
            index = 3
        else:
            raise ValueError(f"Unknown position type: {tokens[1]}")

        if index < len(tokens) and tokens[index] == "turn":
            if index + 1 >= len(tokens):
                raise ValueError("Missing turn value")
            to_move = parse_turn(tokens[index + 1])
            index += 2

        if index < len(tokens):
            if tokens[index] != "moves":
                raise ValueError(f"Unexpected token: {tokens[index]}")

            for move_str in tokens[index + 1:]:
                if is_terminal(board):
                    raise ValueError(f"Move {move_str} played after the game ended")
                try:
                    column = int(move_str)
                except ValueError:
                    raise ValueError(f"Invalid move format: {move_str}")
                board = apply_move(board, column, to_move)
                to_move = opponent(to_move)

        return board, to_move

    def handle_position(self, tokens):
        """
        Handle 'position' command - set board position.

        Formats:
            position startpos
            position startpos moves 3 3 4
            position startpos turn o moves 3
            position board <rows> [turn x|o] [moves ...]

        Board rows are given top to bottom, separated by '/'. Without a
        turn, the side to move is inferred from the piece counts. On any
        error the previous position is kept.

        Args:
            tokens: Command tokens (e.g., ['position', 'startpos', 'moves', '3'])
        """
        self.logger.info(f"Handling: position {' '.join(tokens[1:])}")

        try:
            board, to_move = self._parse_position(tokens)
        except ValueError as e:
            self._report_error(f"Invalid position: {e}")
            return

        self.board = board
        self.to_move = to_move
        self.logger.info(
            f"Position updated: {board.to_string()} ({CELL_TO_SYMBOL[to_move]} to move)"
        )

    def handle_setoption(self, tokens):
        """
        Handle 'setoption' command - change search settings.

        Formats:
            setoption name Algorithm value mtdf
            setoption name Depth value 7

        Args:
            tokens: Command tokens
        """
        self.logger.info(f"Handling: setoption {' '.join(tokens[1:])}")

        try:
            name_index = tokens.index("name")
            value_index = tokens.index("value")
            name = " ".join(tokens[name_index + 1:value_index]).lower()
            value = " ".join(tokens[value_index + 1:])
        except ValueError:
            self._report_error(f"Malformed setoption: {' '.join(tokens)}")
            return

        try:
            if name == "algorithm":
                self.algorithm = Algorithm(value.lower())
            elif name == "depth":
                self.depth = validate_depth(int(value))
            else:
                self.logger.warning(f"Unknown option ignored: {name}")
                return
        except ValueError as e:
            self._report_error(f"Invalid value for {name}: {e}")
            return

        self.logger.debug(f"Option {name} set to {value}")

    def handle_go(self, tokens):
        """
        Handle 'go' command - search the current position.

        Formats:
            go
            go depth 6
            go algorithm mtdf depth 4

        Output:
            info depth D score S nodes N time T algorithm A
            bestmove <column>

        'bestmove none' is sent when the game is already over.

        Args:
            tokens: Command tokens (e.g., ['go', 'depth', '5'])
        """
        self.logger.info(f"Handling: go {' '.join(tokens[1:])}")

        depth = self.depth
        algorithm = self.algorithm

        try:
            i = 1
            while i < len(tokens):
                if tokens[i] == "depth" and i + 1 < len(tokens):
                    depth = validate_depth(int(tokens[i + 1]))
                    i += 2
                elif tokens[i] == "algorithm" and i + 1 < len(tokens):
                    algorithm = Algorithm(tokens[i + 1].lower())
                    i += 2
                else:
                    i += 1
        except ValueError as e:
            self._report_error(f"Invalid go parameters: {e}")
            return

        if is_terminal(self.board):
            self.logger.info("Game is over, no move to search")
            self._send("bestmove none")
            return

        self.logger.info(
            f"Search started: algorithm={algorithm.value}, depth={depth}, "
            f"position={self.board.to_string()}"
        )

        start_time = time.time()
        result = self.session.select_move(self.board, algorithm, depth, self.to_move)
        elapsed_ms = int((time.time() - start_time) * 1000)

        self.logger.info(
            f"Search complete: column={result.column}, score={result.evaluation}, "
            f"nodes={result.nodes_visited}, time={elapsed_ms}ms"
        )
        self.logger.debug(f"Table: {self.session.transposition_table.get_stats()}")

        info_parts = [
            "info",
            f"depth {depth}",
            f"score {result.evaluation}",
            f"nodes {result.nodes_visited}",
            f"time {elapsed_ms}",
            f"algorithm {algorithm.value}",
        ]
        self._send(" ".join(info_parts))
        self._send(f"bestmove {result.column}")

    def handle_quit(self):
        """Handle 'quit' command - shutdown engine."""
        self.logger.info("Handling: quit - shutting down engine")
        self.logger.info("=== connect4-engine stopped ===")
