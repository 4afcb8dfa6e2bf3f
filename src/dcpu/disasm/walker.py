''' Word stream walker '''

import logging as lg
from typing import Iterable, Iterator, Sequence

from dcpu.disasm.decoder import Instruction, decode_instruction
from dcpu.disasm.tables import OpcodeTables, DEFAULT_TABLES


def disassemble(
    words: Sequence[int],
    tables: OpcodeTables = DEFAULT_TABLES,
    hex_words: bool = False
) -> Iterator[Instruction]:
    i = 0

    while i < len(words):
        next_word = words[i + 1] if i + 1 < len(words) else None
        instruction = decode_instruction(words[i], next_word, tables, i, hex_words)

        if next_word is None and instruction.size > 1:
            lg.debug(f'Instruction at {i:04X} is missing its trailing word, using 0')

        yield instruction
        i += instruction.size


def format_listing(instruction: Instruction) -> str:
    raw = ' '.join(f'{w:04X}' for w in instruction.words)
    return f'{instruction.address:04X}: {raw:<9}  {instruction.text()}'


def render(instructions: Iterable[Instruction], listing: bool = False) -> Iterator[str]:
    for instruction in instructions:
        if listing:
            yield format_listing(instruction)
        else:
            yield instruction.text()
