# type: ignore
''' Hex dump grammar '''

import pyparsing as pp

from dcpu.disasm.collector import WordCollector


# Everything str.isspace() accepts, the same class \s and \S use below
WHITESPACE = ''.join(chr(c) for c in range(0x3001) if chr(c).isspace())

hex_word = pp.Regex(r'(?:0[xX])?[0-9a-fA-F]+(?!\S)') \
    .set_parse_action(lambda r: (WordCollector.on_word, r[0]))

invalid_token = pp.Regex(r'\S+') \
    .set_parse_action(lambda r: (WordCollector.on_invalid, r[0]))

token = hex_word | invalid_token

dump = pp.ZeroOrMore(token)

for element in (hex_word, invalid_token, token, dump):
    element.set_whitespace_chars(WHITESPACE)
