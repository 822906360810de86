from ..core.model import UnitKind
from . import Unit, register_unit

@register_unit
class Block(Unit):
    kind = UnitKind.BLOCK

    @staticmethod
    def index_for(grid, unit, offset):
        return grid.index_for_block(unit, offset)

    @staticmethod
    def members(grid, index):
        return grid.block_of(index)
