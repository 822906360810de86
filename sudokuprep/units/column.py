from ..core.model import UnitKind
from . import Unit, register_unit

@register_unit
class Column(Unit):
    kind = UnitKind.COLUMN

    @staticmethod
    def index_for(grid, unit, offset):
        return grid.index_for_column(unit, offset)

    @staticmethod
    def members(grid, index):
        return grid.column_of(index)
