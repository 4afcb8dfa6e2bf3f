import logging as lg
from typing import List

from dcpu.common.hwconf import WORD_MASK


class WordCollector:
    ''' Accumulates words from grammar actions '''
    words: List[int]
    rejected: List[str]

    def __init__(self):
        self.words = list()
        self.rejected = list()

    def on_word(self, token: str):
        value = int(token, 16)

        if value > WORD_MASK:
            lg.error(f'Hex value {token} does not fit in a word')
            self.rejected.append(token)
            return

        self.words.append(value)

    def on_invalid(self, token: str):
        lg.error(f'Invalid hex value {token}')
        self.rejected.append(token)
