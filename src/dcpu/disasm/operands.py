''' Operand decoding

Operand codes are 6 bits wide. Their meaning depends on the slot:
'b' is the first (destination) operand, 'a' the second (source) one.
Code 0x18 is push in 'b' and pop in 'a', inline literals are only
legal in 'a'.
'''

import logging as lg
from dataclasses import dataclass
from typing import Callable, Literal

import dcpu.common.ops as ops
from dcpu.common.hwconf import REGISTERS, SP_NAME, PC_NAME, EX_NAME, LITERAL_BIAS


Position = Literal['b', 'a']

UNKNOWN_OPERAND = 'UNKNOWN OPERAND'


@dataclass(frozen=True)
class Operand:
    text: str
    uses_next_word: bool = False
    valid: bool = True

    def __str__(self):
        return self.text


def uses_next_word(code: int) -> bool:
    ''' True if the operand code reads the word following the instruction '''
    return ops.REG_OFF <= code <= ops.REG_OFF_END \
        or code in (ops.PICK, ops.NEXT_IND, ops.NEXT_LIT)


def format_word(word: int, hex_words: bool = False) -> str:
    if hex_words:
        return f'0x{word:04X}'

    return str(word)


def _unknown(code: int, position: Position) -> Operand:
    lg.debug(f'Unknown operand 0x{code:02X} in {position}')
    return Operand(UNKNOWN_OPERAND, valid=False)


def _decode_common(code: int, next_word: int, hex_words: bool) -> Operand | None:
    nw = format_word(next_word, hex_words)

    if code < ops.REG_IND:
        return Operand(REGISTERS[code])

    if code < ops.REG_OFF:
        return Operand(f'[{REGISTERS[code - ops.REG_IND]}]')

    if code <= ops.REG_OFF_END:
        return Operand(f'[{REGISTERS[code - ops.REG_OFF]} + {nw}]', uses_next_word=True)

    if code == ops.PEEK:
        return Operand('[SP] / PEEK')

    if code == ops.PICK:
        return Operand(f'[SP + {nw}] / PICK n', uses_next_word=True)

    if code == ops.SP:
        return Operand(SP_NAME)

    if code == ops.PC:
        return Operand(PC_NAME)

    if code == ops.EX:
        return Operand(EX_NAME)

    if code == ops.NEXT_IND:
        return Operand(f'[{nw}]', uses_next_word=True)

    if code == ops.NEXT_LIT:
        return Operand(nw, uses_next_word=True)

    return None


def decode_b(code: int, next_word: int = 0, hex_words: bool = False) -> Operand:
    ''' Decodes the first (destination) operand '''
    if code == ops.PUSH_POP:
        return Operand('(PUSH / [--SP])')

    if ops.LITERAL <= code <= ops.LITERAL_END:
        lg.warning(f'Literal operand 0x{code:02X} is not allowed in b')
        return Operand(UNKNOWN_OPERAND, valid=False)

    operand = _decode_common(code, next_word, hex_words)
    return operand if operand is not None else _unknown(code, 'b')


def decode_a(code: int, next_word: int = 0, hex_words: bool = False) -> Operand:
    ''' Decodes the second (source) operand '''
    if code == ops.PUSH_POP:
        return Operand('(POP / [SP++])')

    if ops.LITERAL <= code <= ops.LITERAL_END:
        return Operand(str(code - LITERAL_BIAS))

    operand = _decode_common(code, next_word, hex_words)
    return operand if operand is not None else _unknown(code, 'a')


DECODERS: dict[Position, Callable[..., Operand]] = {
    'b': decode_b,
    'a': decode_a
}


def decode_operand(
    code: int,
    next_word: int = 0,
    is_first: bool = False,
    hex_words: bool = False
) -> Operand:
    decoder = DECODERS['b' if is_first else 'a']
    return decoder(code, next_word, hex_words)
