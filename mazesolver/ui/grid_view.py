"""Grid view showing a maze and the progress of a search."""

from typing import Dict, Optional

from PySide6.QtWidgets import QGraphicsView, QGraphicsScene
from PySide6.QtGui import QPainter
from PySide6.QtCore import Qt

from ..domain.astar import SearchContext
from ..domain.types import Position
from ..utils.maze_parser import ParsedMaze
from .tiles import GridTile


class GridView(QGraphicsView):
    """Graphics view for displaying the maze grid."""

    def __init__(self, maze: ParsedMaze, tile_size: float = 18.0):
        super().__init__()

        self.maze = maze
        self.tile_size = tile_size
        self.show_costs = False
        self.scene = QGraphicsScene()
        self.setScene(self.scene)
        self.tiles: Dict[Position, GridTile] = {}

        self.setRenderHint(QPainter.Antialiasing)
        self._build_tiles()

    def _build_tiles(self):
        grid = self.maze.grid
        self.scene.clear()
        self.tiles.clear()
        self.scene.setSceneRect(0, 0, grid.cols * self.tile_size, grid.rows * self.tile_size)

        for row in range(grid.rows):
            for col in range(grid.cols):
                pos = Position(row, col)
                tile = GridTile(row, col, self.tile_size, self._base_state(pos))
                self.scene.addItem(tile)
                self.tiles[pos] = tile

    def _base_state(self, pos: Position) -> str:
        if pos == self.maze.start:
            return "start"
        if pos == self.maze.goal:
            return "target"
        if self.maze.grid.is_wall(pos):
            return "wall"
        return "empty"

    def show_search(self, context: Optional[SearchContext]):
        """Color every tile from the frontier, closed set and result of ``context``."""
        path = set()
        queued = set()
        if context is not None:
            queued = set(context.open_set.positions())
            if context.result is not None and context.result.path:
                path = set(context.result.path)

        for pos, tile in self.tiles.items():
            state = self._base_state(pos)
            record = None
            if context is not None and state == "empty":
                if pos in path:
                    state = "path"
                elif pos == context.current:
                    state = "current"
                elif pos in context.closed_set:
                    state = "closed"
                elif pos in queued:
                    state = "open"
                record = context.closed_set.get(pos) or context.open_set.get(pos)
            tile.set_state(state, record)

    def set_show_costs(self, show: bool):
        """Enable or disable cost display on all tiles."""
        self.show_costs = show
        for tile in self.tiles.values():
            tile.set_show_costs(show)

    def wheelEvent(self, event):
        """Handle mouse wheel for zooming."""
        zoom_factor = 1.15
        if event.angleDelta().y() > 0:
            self.scale(zoom_factor, zoom_factor)
        else:
            self.scale(1 / zoom_factor, 1 / zoom_factor)

    def fit_in_view(self):
        """Fit the entire grid in the view."""
        if self.scene.items():
            self.fitInView(self.scene.itemsBoundingRect(), Qt.KeepAspectRatio)
