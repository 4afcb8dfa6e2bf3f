import sys
from pathlib import Path
import logging as lg
from typing import Iterator, Sequence

import click
from click.core import ParameterSource

from dcpu.common.settings import DisasmSettings, ConfigError, load_settings
from dcpu.disasm.source import SourceError, collect_file
from dcpu.disasm.tables import OpcodeTables, DEFAULT_TABLES
import dcpu.disasm.walker as walker


EXIT_OK = 0
EXIT_FAILURE = 1

PROMPT = 'Enter the file path (hex words separated by spaces or line breaks, 78f1 0001 etc)'


class EmptySource(Exception):
    pass


def disassemble_words(
    words: Sequence[int],
    settings: DisasmSettings,
    tables: OpcodeTables = DEFAULT_TABLES
) -> Iterator[str]:
    if not words:
        raise EmptySource('No valid words found')

    lg.debug(f'Disassembling {len(words)} words')
    instructions = walker.disassemble(words, tables, settings.hex_words)
    return walker.render(instructions, settings.listing)


def log_level(settings: DisasmSettings) -> int:
    return lg.DEBUG if settings.verbose else lg.INFO


def from_command_line(name: str, value: bool) -> bool | None:
    source = click.get_current_context().get_parameter_source(name)
    return value if source == ParameterSource.COMMANDLINE else None


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('-l', '--listing/--no-listing', help='Prefix lines with address and raw words')
@click.option('-x', '--hex/--no-hex', 'hex_words', help='Show trailing words in hex')
@click.option('-c', '--config', type=click.Path(path_type=Path), help='TOML settings file')
@click.argument('source', type=Path, required=False)
def disasm(verbose: bool, listing: bool, hex_words: bool, config: Path | None, source: Path | None):
    settings = DisasmSettings().update(verbose=verbose)

    lg.basicConfig(level=log_level(settings))
    lg.info('DCPU DISASM')

    try:
        if config is not None:
            load_settings(config, settings)

        # Flags given on the command line override the config file
        settings.update(
            listing=from_command_line('listing', listing),
            hex_words=from_command_line('hex_words', hex_words)
        )

        if source is None:
            source = click.prompt(PROMPT, type=Path)

        words = collect_file(source)

        for line in disassemble_words(words, settings):
            click.echo(line)

    except (SourceError, ConfigError) as e:
        lg.error(e)
        sys.exit(EXIT_FAILURE)

    except EmptySource:
        lg.error('No valid words found, exiting')
        sys.exit(EXIT_FAILURE)

    sys.exit(EXIT_OK)


if __name__ == '__main__':
    disasm()
