"""Controllers: Qt-free coordination between the table and the selection core."""

from artgrid.controllers.table_controller import TableController

__all__ = ["TableController"]
