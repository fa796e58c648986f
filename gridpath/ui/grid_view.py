"""Grid view for pathfinding visualization."""

from PySide6.QtCore import Qt
from PySide6.QtGui import QPainter
from PySide6.QtWidgets import QGraphicsScene, QGraphicsView

from ..app.controller import GridController
from .tiles import AxisLabel, GridTile, PathOverlay


class GridView(QGraphicsView):
    """Graphics view for displaying and editing the grid."""

    def __init__(self, controller: GridController):
        super().__init__()

        self.controller = controller
        self.scene = QGraphicsScene()
        self.setScene(self.scene)

        self.tile_size = float(controller.config.cell_size)
        self.path_thickness = controller.config.path_thickness

        self.setRenderHint(QPainter.Antialiasing)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarAsNeeded)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarAsNeeded)

        self.controller.grid_updated.connect(self.update_grid)

        self.update_grid()

    def _cell_state(self, x: int, y: int) -> str:
        coord = (x, y)
        if coord == self.controller.start_coord:
            return "start"
        if coord == self.controller.goal_coord:
            return "goal"
        if self.controller.grid.is_obstacle(x, y):
            return "obstacle"
        return "free"

    def update_grid(self):
        """Rebuild the scene from the controller's grid, endpoints and path."""
        grid = self.controller.grid

        self.scene.clear()

        self.scene.setSceneRect(0, 0, grid.width * self.tile_size, grid.height * self.tile_size)

        for y in range(grid.height):
            for x in range(grid.width):
                self.scene.addItem(GridTile(x, y, self.tile_size, self._cell_state(x, y)))

        path = self.controller.path
        if len(path) > 1:
            self.scene.addItem(PathOverlay(path, self.tile_size, self.path_thickness))

        for i in range(grid.width):
            self.scene.addItem(AxisLabel(i, self.tile_size, vertical=False))
        for i in range(grid.height):
            self.scene.addItem(AxisLabel(i, self.tile_size, vertical=True))

    def mousePressEvent(self, event):
        """Left click toggles an obstacle, right click places start or goal."""
        scene_pos = self.mapToScene(event.position().toPoint())
        x = int(scene_pos.x() // self.tile_size)
        y = int(scene_pos.y() // self.tile_size)

        if self.controller.grid.in_bounds(x, y):
            if event.button() == Qt.LeftButton:
                self.controller.toggle_obstacle((x, y))
            elif event.button() == Qt.RightButton:
                self.controller.place_endpoint((x, y))

        super().mousePressEvent(event)
