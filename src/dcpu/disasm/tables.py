''' Opcode -> mnemonic tables '''

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

import dcpu.common.ops as ops


BINARY_OPCODES: Mapping[int, str] = MappingProxyType({
    ops.SET: 'SET',
    ops.ADD: 'ADD',
    ops.SUB: 'SUB',
    ops.MUL: 'MUL',
    ops.MLI: 'MLI',
    ops.DIV: 'DIV',
    ops.DVI: 'DVI',
    ops.MOD: 'MOD',
    ops.MDI: 'MDI',
    ops.AND: 'AND',
    ops.BOR: 'BOR',
    ops.XOR: 'XOR',
    ops.SHR: 'SHR',
    ops.ASR: 'ASR',
    ops.SHL: 'SHL',
    ops.IFB: 'IFB',
    ops.IFC: 'IFC',
    ops.IFE: 'IFE',
    ops.IFN: 'IFN',
    ops.IFG: 'IFG',
    ops.IFA: 'IFA',
    ops.IFL: 'IFL',
    ops.IFU: 'IFU',
    ops.ADX: 'ADX',
    ops.SBX: 'SBX',
    ops.STI: 'STI',
    ops.STD: 'STD'
})

SPECIAL_OPCODES: Mapping[int, str] = MappingProxyType({
    ops.JSR: 'JSR',
    ops.INT: 'INT',
    ops.IAG: 'IAG',
    ops.IAS: 'IAS',
    ops.RFI: 'RFI',
    ops.IAQ: 'IAQ',
    ops.HWN: 'HWN',
    ops.HWQ: 'HWQ',
    ops.HWI: 'HWI'
})


@dataclass(frozen=True)
class OpcodeTables:
    binary: Mapping[int, str] = field(default_factory=lambda: BINARY_OPCODES)
    special: Mapping[int, str] = field(default_factory=lambda: SPECIAL_OPCODES)

    def lookup_binary(self, code: int) -> str | None:
        return self.binary.get(code)

    def lookup_special(self, code: int) -> str | None:
        return self.special.get(code)


DEFAULT_TABLES = OpcodeTables()
