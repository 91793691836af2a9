"""Main window for the maze search viewer."""

import logging
from typing import Optional

from PySide6.QtWidgets import (
    QMainWindow, QVBoxLayout, QHBoxLayout, QWidget, QPushButton,
    QLabel, QCheckBox, QStatusBar
)
from PySide6.QtCore import QTimer
from PySide6.QtGui import QKeySequence, QShortcut

from ..app.render import RenderConfig
from ..domain.astar import SearchContext
from ..domain.types import AlgoConfig
from ..utils.maze_parser import ParsedMaze
from .grid_view import GridView

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Window that animates an A* search over one maze."""

    def __init__(self, maze: ParsedMaze, config: Optional[AlgoConfig] = None,
                 interval_ms: int = 30, tile_size: float = 18.0):
        super().__init__()
        self.maze = maze
        self.config = config or AlgoConfig()
        self.context: Optional[SearchContext] = None

        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._on_timer_tick)

        self.setWindowTitle("A* Maze Solver")
        self.setMinimumSize(900, 600)

        self._create_ui(tile_size)
        self._setup_shortcuts()
        self._on_reset_clicked()

    def _create_ui(self, tile_size: float):
        """Create the user interface."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QVBoxLayout(central_widget)

        controls = QHBoxLayout()
        self.step_btn = QPushButton("Step")
        self.run_btn = QPushButton("Run")
        self.reset_btn = QPushButton("Reset")
        self.costs_check = QCheckBox("Show costs")
        for widget in (self.step_btn, self.run_btn, self.reset_btn, self.costs_check):
            controls.addWidget(widget)
        controls.addStretch(1)

        self.explored_label = QLabel()
        self.open_label = QLabel()
        controls.addWidget(self.explored_label)
        controls.addWidget(self.open_label)
        main_layout.addLayout(controls)

        self.grid_view = GridView(self.maze, tile_size)
        main_layout.addWidget(self.grid_view, 1)

        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)

        self.step_btn.clicked.connect(self._on_step_clicked)
        self.run_btn.clicked.connect(self._on_run_clicked)
        self.reset_btn.clicked.connect(self._on_reset_clicked)
        self.costs_check.toggled.connect(self.grid_view.set_show_costs)

    def _setup_shortcuts(self):
        QShortcut(QKeySequence("Space"), self, self._on_step_clicked)
        QShortcut(QKeySequence("Return"), self, self._on_run_clicked)
        QShortcut(QKeySequence("R"), self, self._on_reset_clicked)
        QShortcut(QKeySequence("Q"), self, self.close)

    def _on_step_clicked(self):
        self._timer.stop()
        self._advance()

    def _on_run_clicked(self):
        if self._timer.isActive():
            self._timer.stop()
            self.run_btn.setText("Run")
        elif not self.context.is_complete:
            self._timer.start()
            self.run_btn.setText("Pause")

    def _on_reset_clicked(self):
        self._timer.stop()
        self.run_btn.setText("Run")
        self.context = SearchContext(self.maze.grid, self.maze.start, self.maze.goal, self.config)
        self.status_bar.showMessage(
            "Space: step | Enter: run/pause | R: reset | Q: quit | wheel: zoom"
        )
        self._refresh()

    def _on_timer_tick(self):
        self._advance()

    def _advance(self):
        if self.context.is_complete:
            return
        result = self.context.step()
        self._refresh()
        if result is not None:
            self._timer.stop()
            self.run_btn.setText("Run")
            if result.success:
                message = (f"Path count: {result.path_length} | "
                           f"Searched squares count: {result.nodes_explored}")
            else:
                message = RenderConfig().no_path_message
            logger.info(message)
            self.status_bar.showMessage(message)

    def _refresh(self):
        self.grid_view.show_search(self.context)
        self.explored_label.setText(f"Closed: {len(self.context.closed_set)}")
        self.open_label.setText(f"Open: {len(self.context.open_set)}")
        self.step_btn.setEnabled(not self.context.is_complete)

    def showEvent(self, event):
        super().showEvent(event)
        self.grid_view.fit_in_view()

    def closeEvent(self, event):
        """Stop the timer before the window goes away."""
        self._timer.stop()
        super().closeEvent(event)
