''' Word source: hex dump text -> 16-bit words '''

from pathlib import Path
import logging as lg
from typing import List

import pyparsing as pp

import dcpu.disasm.grammar as grammar
from dcpu.disasm.collector import WordCollector


class SourceError(Exception):
    pass


def collect_text(text: str) -> List[int]:
    ''' Parses whitespace separated hex words

    Bad tokens are reported and dropped, which shifts the alignment of
    every following instruction.
    '''
    collector = WordCollector()

    try:
        actions = grammar.dump.parse_string(text, parse_all=True)
    except pp.ParseBaseException as e:
        raise SourceError(f'Unable to tokenize hex dump: {e}') from e

    for (func, arg) in actions:  # type: ignore
        func(collector, arg)

    lg.debug(f'Collected {len(collector.words)} words, rejected {len(collector.rejected)}')
    return collector.words


def collect_file(filepath: str | Path) -> List[int]:
    if isinstance(filepath, str):
        filepath = Path(filepath)

    lg.debug(f'Collecting file {filepath}')

    try:
        text = filepath.read_text()
    except (OSError, UnicodeDecodeError) as e:
        raise SourceError(f'Unable to open {filepath}: {e}') from e

    return collect_text(text)
