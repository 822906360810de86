from ..core.model import UnitKind
from . import Unit, register_unit

@register_unit
class Row(Unit):
    kind = UnitKind.ROW

    @staticmethod
    def index_for(grid, unit, offset):
        return grid.index_for_row(unit, offset)

    @staticmethod
    def members(grid, index):
        return grid.row_of(index)
