"""
Terminal Display - Rich-based rendering of the snake board.

Used by the headless simulation script and for printing a final board.
Each grid cell is drawn as two characters so the board looks square.
"""

from typing import Any, Dict, Optional, Tuple

from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from ..core.renderer_interface import RendererInterface
from ..games.snake.game import BODY, EMPTY, FOOD, HEAD, rasterize
from ..games.snake.geometry import Position


CELL_STYLES = {
    EMPTY: ("· ", "grey30"),
    BODY: ("██", "green"),
    HEAD: ("██", "bold bright_green"),
    FOOD: ("██", "red"),
}


class TerminalRenderer(RendererInterface):
    """
    Draws a game state dictionary as a rich Panel.

    The "surface" passed to render() is a rich Console.
    """

    def __init__(self, grid_size: int = 20, title: str = "Snake"):
        self.grid_size = grid_size
        self.title = title

    def get_preferred_size(self) -> Tuple[int, int]:
        """Size in terminal columns and rows, including border and status lines."""
        return (self.grid_size * 2 + 4, self.grid_size + 4)

    def get_cell_size(self) -> int:
        return 2

    def build(self, game_state: Dict[str, Any]) -> Panel:
        """
        Build the renderable for a game state.

        Args:
            game_state: Dictionary from Snapshot.to_dict()

        Returns:
            Panel containing the board
        """
        size = game_state.get("width", self.grid_size)
        body = [Position.from_pair(p) for p in game_state["snake"]]
        grid = rasterize(body, Position.from_pair(game_state["food"]), size)

        board = Text()
        for row in grid:
            for cell in row:
                glyph, style = CELL_STYLES[int(cell)]
                board.append(glyph, style=style)
            board.append("\n")

        # Status lines go inside the panel so narrow boards never truncate them
        board.append(f"length {len(body)}\nstep {game_state.get('steps', 0)}", style="grey70")
        if game_state.get("game_over"):
            board.append("\nGAME OVER", style="bold red")
            board.append(f"\n({game_state.get('collision') or 'collision'})", style="red")
        return Panel(board, title=self.title, expand=False)

    def render(self, game_state: Dict[str, Any], surface: Console) -> None:
        """Print the board to a console."""
        surface.print(self.build(game_state))


class LiveBoard:
    """
    In-place terminal view that redraws the board on every update.
    """

    def __init__(self, renderer: TerminalRenderer, console: Optional[Console] = None,
                 refresh_per_second: int = 20):
        self.renderer = renderer
        # Force UTF-8 encoding for Windows compatibility
        self.console = console or Console(force_terminal=True, legacy_windows=False)
        self.refresh_per_second = refresh_per_second
        self.live: Optional[Live] = None

    def start(self, game_state: Dict[str, Any]):
        """Start the live display."""
        self.live = Live(
            self.renderer.build(game_state),
            console=self.console,
            refresh_per_second=self.refresh_per_second,
            transient=False,
        )
        self.live.start()

    def update(self, game_state: Dict[str, Any]):
        """Redraw with a new game state."""
        if self.live:
            self.live.update(self.renderer.build(game_state))

    def stop(self):
        """Stop the live display."""
        if self.live:
            self.live.stop()
            self.live = None
