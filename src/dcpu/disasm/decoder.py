''' Single instruction decoder '''

import logging as lg
from dataclasses import dataclass, field
from typing import NamedTuple, Sequence

from dcpu.common.hwconf import OPCODE_MASK, B_SHIFT, B_MASK, A_SHIFT, A_MASK
from dcpu.disasm.operands import Operand, decode_a, decode_b, uses_next_word
from dcpu.disasm.tables import OpcodeTables, DEFAULT_TABLES


UNKNOWN_OPCODE = 'UNKNOWN OPCODE'
UNKNOWN_SPECIAL_OPCODE = 'UNKNOWN SPECIAL OPCODE'


class Fields(NamedTuple):
    opcode: int
    b: int
    a: int


def split_fields(word: int) -> Fields:
    return Fields(
        word & OPCODE_MASK,
        (word >> B_SHIFT) & B_MASK,
        (word >> A_SHIFT) & A_MASK
    )


def is_special(fields: Fields) -> bool:
    return fields.opcode == 0


def instruction_size(word: int) -> int:
    ''' Number of words (1 or 2) the instruction starting with `word` occupies

    In the special form the 'b' field selects the opcode, so only 'a'
    is an operand.
    '''
    fields = split_fields(word)
    codes = (fields.a,) if is_special(fields) else (fields.b, fields.a)
    return 2 if any(uses_next_word(code) for code in codes) else 1


@dataclass(frozen=True)
class Instruction:
    mnemonic: str
    operands: Sequence[Operand] = field(default_factory=tuple)
    address: int = 0
    size: int = 1
    words: Sequence[int] = field(default_factory=tuple)  # raw words actually read
    known: bool = True

    def text(self) -> str:
        if not self.operands:
            return self.mnemonic

        return f'{self.mnemonic} ' + ', '.join(str(op) for op in self.operands)

    def __str__(self):
        return self.text()


def decode_instruction(
    word: int,
    next_word: int | None = 0,
    tables: OpcodeTables = DEFAULT_TABLES,
    address: int = 0,
    hex_words: bool = False
) -> Instruction:
    ''' Decodes the instruction in `word`

    `next_word` is the word following it in the stream, or None past the
    end of the stream, in which case operands that need it read 0.
    Unknown opcodes and operands decode to placeholders, never raise.
    '''
    fields = split_fields(word)
    size = instruction_size(word)

    if size == 1 or next_word is None:
        words: tuple[int, ...] = (word,)
    else:
        words = (word, next_word)

    nw = next_word or 0

    lg.debug(f'{address:04X}: {word:04X} op:{fields.opcode:X} b:{fields.b:X} a:{fields.a:X}')

    if is_special(fields):
        mnemonic = tables.lookup_special(fields.b)

        if mnemonic is None:
            return Instruction(UNKNOWN_SPECIAL_OPCODE, (), address, size, words, known=False)

        operands = (decode_a(fields.a, nw, hex_words),)
        return Instruction(mnemonic, operands, address, size, words)

    mnemonic = tables.lookup_binary(fields.opcode)

    if mnemonic is None:
        return Instruction(UNKNOWN_OPCODE, (), address, size, words, known=False)

    operands = (
        decode_b(fields.b, nw, hex_words),
        decode_a(fields.a, nw, hex_words)
    )

    return Instruction(mnemonic, operands, address, size, words)
