import pytest

from gridpath.domain.grid import GridStore


@pytest.fixture
def open_grid():
    return GridStore(20, 20)


@pytest.fixture
def gap_wall_grid():
    """Row 10 blocked from x=5 to x=14 except a gap at x=9."""
    grid = GridStore(20, 20)
    for x in range(5, 15):
        if x != 9:
            grid.set_obstacle(x, 10)
    return grid


@pytest.fixture
def qt_app():
    QtCore = pytest.importorskip("PySide6.QtCore")
    app = QtCore.QCoreApplication.instance() or QtCore.QCoreApplication([])
    yield app
