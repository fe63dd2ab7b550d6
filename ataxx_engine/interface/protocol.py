"""
Text Command Interface

This module implements a line-oriented command protocol for playing
against the engine from a terminal or driving it from another program.

Commands Supported:
    - new: Clear the board to the starting position
    - block <sq>: Block a square and its mirror images (before the first move)
    - auto <color> / manual <color>: Let the engine or the user play a side
    - start: Let the engine move if it is its turn
    - <sq>-<sq> / -: Play a move or pass for the side to move
    - undo: Take back the last move
    - go [depth N]: Print the engine's choice without playing it
    - board: Print the board with coordinates
    - dump: Print the board in the layout accepted by BoardState.from_string
    - help: List commands
    - quit: Exit

Protocol Flow:
    User → "a7-b6"
    Engine → "Blue plays g7-f6."
    User → "go depth 3"
    Engine → "bestmove b6-c5 score 2 nodes 1234"
"""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from ataxx_engine.board.errors import GameError
from ataxx_engine.board.pieces import BLUE, EMPTY, RED, PieceColor
from ataxx_engine.board.state import BoardState
from ataxx_engine.config import EngineConfig
from ataxx_engine.interface.notation import format_move, looks_like_move, parse_move, parse_square
from ataxx_engine.players import AIPlayer, ManualPlayer, Player
from ataxx_engine.search.alphabeta import SearchEngine, find_best_move

COLOR_NAMES = {"red": RED, "blue": BLUE}

HELP_TEXT = """\
new              clear the board
block <sq>       block a square and its reflections
auto <color>     engine plays red/blue
manual <color>   you play red/blue
start            let the engine move if it is on turn
<sq>-<sq> | -    move or pass
undo             take back the last move
go [depth N]     show the engine's choice
board | dump     show the board
quit             exit"""


def setup_logger(debug: bool = False, log_dir: Optional[Path] = None) -> logging.Logger:
    """
    Setup file-based logger for the engine.

    Args:
        debug: If True, log at DEBUG level; otherwise INFO level
        log_dir: Directory for engine.log (default: ~/.ataxx_engine)

    Returns:
        Configured logger instance
    """
    log_dir = Path(log_dir) if log_dir is not None else Path.home() / ".ataxx_engine"
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "engine.log"

    logger = logging.getLogger("ataxx_engine")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    handler = logging.FileHandler(log_file, mode='w')
    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


def parse_color(text: str) -> PieceColor:
    try:
        return COLOR_NAMES[text.lower()]
    except KeyError:
        raise ValueError(f"Unknown color: {text!r}") from None


class TextInterface:
    """
    Command loop coordinating the board, the players and the engine.

    Attributes:
        board: Current position
        config: Engine configuration
        players: Player for each color
        stdin: Command source

    Methods:
        run: Main command loop
        execute: Handle one command line
    """

    def __init__(self, config: Optional[EngineConfig] = None, stdin: Optional[TextIO] = None):
        self.config = config if config else EngineConfig()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.board = BoardState()
        self.engine = SearchEngine(max_depth=self.config.max_depth)
        self.players = {
            RED: self._make_player(RED, self.config.red_player),
            BLUE: self._make_player(BLUE, self.config.blue_player),
        }
        self.running = False
        self._announced = False

        self.logger = setup_logger(debug=self.config.debug, log_dir=self.config.log_dir)
        self.logger.info("=== Ataxx Engine Started ===")
        self.logger.info(f"Log file: {self.config.log_dir / 'engine.log'}")
        self.logger.debug(repr(self.config))

    def _make_player(self, color: PieceColor, kind: str) -> Player:
        if kind == "auto":
            return AIPlayer(color, self.engine)
        # Manual moves arrive as commands, never pulled by the player itself
        return ManualPlayer(color, lambda board, side: None)

    def _say(self, message: str) -> None:
        print(message)
        sys.stdout.flush()
        self.logger.debug(f"<<< {message}")

    def run(self) -> None:
        """
        Main command loop.

        Reads commands until 'quit' or end of input. A failing command is
        reported and the loop carries on.
        """
        self.running = True
        while self.running:
            line = self.stdin.readline()
            if not line:
                self.logger.info("EOF received, shutting down")
                break
            self.execute(line)
        self.logger.info("=== Ataxx Engine Stopped ===")

    def execute(self, line: str) -> None:
        """Run one command line, reporting rule or syntax errors."""
        command = line.strip()
        if not command:
            return

        self.logger.debug(f">>> {command}")
        try:
            self._dispatch(command)
        except (GameError, ValueError) as e:
            self.logger.warning(f"Rejected '{command}': {e}")
            self._say(f"error: {e}")
        except Exception as e:
            self.logger.error(f"Command error: {e}", exc_info=True)
            self._say(f"error: {e}")

    def _dispatch(self, command: str) -> None:
        tokens = command.split()
        cmd = tokens[0].lower()

        if looks_like_move(command):
            self.handle_move(command)
        elif cmd == "new":
            self.handle_new()
        elif cmd == "block":
            self.handle_block(tokens)
        elif cmd in ("auto", "manual"):
            self.handle_player(cmd, tokens)
        elif cmd == "start":
            self.play_auto()
        elif cmd == "undo":
            self.handle_undo()
        elif cmd == "go":
            self.handle_go(tokens)
        elif cmd == "board":
            self._say(self.board.to_string(legend=True))
        elif cmd == "dump":
            self._say("===")
            self._say(self.board.to_string())
            self._say("===")
        elif cmd == "help":
            self._say(HELP_TEXT)
        elif cmd == "quit":
            self.handle_quit()
        else:
            raise ValueError(f"Unknown command: {command}")

    def handle_new(self) -> None:
        """Handle 'new' - back to the starting position."""
        self.logger.info("Handling: new")
        self.board.clear()
        self._announced = False

    def handle_block(self, tokens) -> None:
        """Handle 'block <sq>'."""
        if len(tokens) != 2:
            raise ValueError("Usage: block <square>")
        col, row = parse_square(tokens[1])
        self.board.set_block(col, row)
        self.logger.info(f"Blocked {tokens[1]} and its reflections")

    def handle_player(self, kind: str, tokens) -> None:
        """Handle 'auto <color>' / 'manual <color>'."""
        if len(tokens) != 2:
            raise ValueError(f"Usage: {kind} <color>")
        color = parse_color(tokens[1])
        self.players[color] = self._make_player(color, kind)
        self.logger.info(f"{color} is now played by {self.players[color]!r}")

    def handle_move(self, text: str) -> None:
        """Handle a move or pass, then let the engine reply."""
        if self.board.game_over():
            raise GameError("Game is over; use 'new' or 'undo'")
        move = parse_move(text)
        mover = self.board.active_color
        self.board.make_move(move)
        self.logger.info(f"{mover} played {format_move(move)}")
        self._check_game_over()
        self.play_auto()

    def handle_undo(self) -> None:
        """Handle 'undo'."""
        self.board.undo()
        self._announced = False
        self.logger.info("Took back the last move")

    def handle_go(self, tokens) -> None:
        """
        Handle 'go [depth N]' - report the engine's move without playing it.

        Output:
            bestmove <move> score <score> nodes <nodes>
        """
        depth = self.config.max_depth
        if len(tokens) >= 3 and tokens[1] == "depth":
            depth = int(tokens[2])

        color = self.board.active_color
        self.logger.info(f"Searching for {color} at depth {depth}")
        move, score, nodes = find_best_move(self.board, color, depth, self.engine.evaluator)
        score_text = "none" if score is None else str(score)
        self._say(f"bestmove {format_move(move)} score {score_text} nodes {nodes}")

    def play_auto(self) -> None:
        """Let engine-controlled sides move until a manual side is on turn."""
        while not self.board.game_over():
            color = self.board.active_color
            player = self.players[color]
            if not isinstance(player, AIPlayer):
                return
            move = player.choose_move(self.board)
            self.board.make_move(move)
            self._say(f"{color} plays {format_move(move)}.")
        self._check_game_over()

    def _check_game_over(self) -> None:
        if self._announced or not self.board.game_over():
            return
        self._announced = True
        winner = self.board.winner()
        if winner is EMPTY:
            result = "Draw."
        else:
            result = f"{winner} wins."
        self.logger.info(f"Game over: {result}")
        self._say(result)

    def handle_quit(self) -> None:
        """Handle 'quit' - stop the command loop."""
        self.logger.info("Handling: quit - shutting down engine")
        self.running = False


def main() -> None:
    """Run the command loop on stdin/stdout."""
    interface = TextInterface()
    interface.run()
