"""Main window for the grid pathfinding visualizer."""

from PySide6.QtGui import QKeySequence, QShortcut
from PySide6.QtWidgets import QMainWindow, QStatusBar, QVBoxLayout, QWidget

from ..app.controller import GridController
from ..app.fsm import PlacementState
from .grid_view import GridView

HELP_TEXT = "Left-click: toggle obstacle | Right-click: place start, then goal | R: reset | C: clear | G: scatter | Q: quit"


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, controller: GridController):
        super().__init__()
        self.controller = controller

        self.setWindowTitle("A* Pathfinding")

        self._create_ui()
        self._setup_connections()
        self._setup_shortcuts()

        self._update_status()

    def _create_ui(self):
        """Create the user interface."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        layout = QVBoxLayout(central_widget)
        layout.setContentsMargins(0, 0, 0, 0)

        self.grid_view = GridView(self.controller)
        layout.addWidget(self.grid_view)

        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)

        config = self.controller.config
        # Room for the scene plus view frame and status bar
        self.resize(config.grid_width * config.cell_size + 4,
                    config.grid_height * config.cell_size + 30)

    def _setup_connections(self):
        """Setup signal connections."""
        self.controller.state_changed.connect(self._on_state_changed)
        self.controller.path_computed.connect(self._on_path_computed)

    def _setup_shortcuts(self):
        """Setup keyboard shortcuts."""
        QShortcut(QKeySequence("R"), self, self.controller.reset)
        QShortcut(QKeySequence("C"), self, self.controller.clear_obstacles)
        QShortcut(QKeySequence("G"), self, self.controller.scatter_obstacles)

        QShortcut(QKeySequence("Q"), self, self.close)
        QShortcut(QKeySequence("Ctrl+Q"), self, self.close)
        QShortcut(QKeySequence("Escape"), self, self.close)

    def _on_state_changed(self, state: PlacementState):
        """Handle placement state change; search outcomes are shown by _on_path_computed."""
        if not self.controller.search_finished:
            self._update_status()

    def _on_path_computed(self, result):
        """Handle search completion."""
        if result.success:
            self.status_bar.showMessage(
                f"Path found! Steps: {result.steps}, Nodes explored: {result.nodes_explored} - press R to reset"
            )
        else:
            self.status_bar.showMessage("No path found - press R to reset")

    def _update_status(self):
        stats = self.controller.statistics()
        self.status_bar.showMessage(f"{stats['state_description']} | {HELP_TEXT}")
