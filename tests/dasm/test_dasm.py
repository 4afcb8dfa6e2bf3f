# type: ignore
import logging

import pytest

import dcpu.disasm.dasm as dasm
from dcpu.common.settings import DisasmSettings

import unit_utils
from fixtures import runner, with_hex_file  # noqa: F401


def test_disassemble_words():
    assert list(dasm.disassemble_words([0x8401], DisasmSettings())) == ['SET A, 0']


def test_disassemble_no_words():
    with pytest.raises(dasm.EmptySource):
        dasm.disassemble_words([], DisasmSettings())


def test_program():
    expected = unit_utils.load_file('testdata/disasm/program.asm').splitlines()
    assert unit_utils.disassemble_file('testdata/disasm/program.hex') == expected


def test_program_listing():
    settings = DisasmSettings().update(listing=True)
    expected = unit_utils.load_file('testdata/disasm/listing.asm').splitlines()
    assert unit_utils.disassemble_file('testdata/disasm/program.hex', settings) == expected


def test_command(runner):  # noqa: F811
    path = unit_utils.find_file('testdata/disasm/program.hex')
    result = runner.invoke(dasm.disasm, [str(path)])

    assert result.exit_code == dasm.EXIT_OK
    assert result.output.splitlines() == unit_utils.load_file('testdata/disasm/program.asm').splitlines()


def test_command_listing(runner):  # noqa: F811
    path = unit_utils.find_file('testdata/disasm/program.hex')
    result = runner.invoke(dasm.disasm, ['--listing', str(path)])

    assert result.exit_code == dasm.EXIT_OK
    assert result.output.splitlines() == unit_utils.load_file('testdata/disasm/listing.asm').splitlines()


def test_command_hex(runner, with_hex_file):  # noqa: F811
    path = with_hex_file('7c01 0030\n')
    result = runner.invoke(dasm.disasm, ['-x', str(path)])

    assert result.exit_code == dasm.EXIT_OK
    assert result.output == 'SET A, 0x0030\n'


def test_command_config(runner):  # noqa: F811
    path = unit_utils.find_file('testdata/disasm/program.hex')
    config = unit_utils.find_file('testdata/disasm/settings.toml')
    result = runner.invoke(dasm.disasm, ['-c', str(config), str(path)])

    assert result.exit_code == dasm.EXIT_OK
    assert result.output.splitlines()[0] == '0000: 7C01 0030  SET A, 0x0030'


def test_command_bad_config(runner, with_hex_file):  # noqa: F811
    path = with_hex_file('8401\n')
    config = with_hex_file('[disasm]\nfoo = true\n', 'disasm.toml')
    result = runner.invoke(dasm.disasm, ['--config', str(config), str(path)])

    assert result.exit_code == dasm.EXIT_FAILURE
    assert 'SET' not in result.output


def test_command_prompt(runner, with_hex_file):  # noqa: F811
    path = with_hex_file('7c01 0005\n')
    result = runner.invoke(dasm.disasm, [], input=f'{path}\n')

    assert result.exit_code == dasm.EXIT_OK
    assert dasm.PROMPT in result.output
    assert result.output.splitlines()[-1] == 'SET A, 5'


def test_command_bad_token(runner):  # noqa: F811
    path = unit_utils.find_file('testdata/disasm/badtoken.hex')
    result = runner.invoke(dasm.disasm, [str(path)])

    assert result.exit_code == dasm.EXIT_OK
    assert result.output == 'SET A, 5\n'


def test_command_missing_file(runner, tmp_path):  # noqa: F811
    result = runner.invoke(dasm.disasm, [str(tmp_path / 'missing.hex')])
    assert result.exit_code == dasm.EXIT_FAILURE


def test_command_no_valid_words(runner, with_hex_file, caplog):  # noqa: F811
    path = with_hex_file('zz yy\n')
    result = runner.invoke(dasm.disasm, [str(path)])

    assert result.exit_code == dasm.EXIT_FAILURE
    assert result.output == ''
    assert 'No valid words' in caplog.text


def test_command_empty_file(runner, with_hex_file):  # noqa: F811
    result = runner.invoke(dasm.disasm, [str(with_hex_file(''))])

    assert result.exit_code == dasm.EXIT_FAILURE
    assert result.output == ''


def test_command_form_feed_separated(runner, with_hex_file):  # noqa: F811
    path = with_hex_file('8401\f8401\v7c01\xa00005\n')
    result = runner.invoke(dasm.disasm, [str(path)])

    assert result.exit_code == dasm.EXIT_OK
    assert result.output == 'SET A, 0\nSET A, 0\nSET A, 5\n'


def test_command_flags_override_config(runner):  # noqa: F811
    path = unit_utils.find_file('testdata/disasm/program.hex')
    config = unit_utils.find_file('testdata/disasm/settings.toml')
    result = runner.invoke(dasm.disasm, ['-c', str(config), '--no-listing', '--no-hex', str(path)])

    assert result.exit_code == dasm.EXIT_OK
    assert result.output.splitlines()[0] == 'SET A, 48'


def test_command_config_kept_without_flags(runner):  # noqa: F811
    path = unit_utils.find_file('testdata/disasm/program.hex')
    config = unit_utils.find_file('testdata/disasm/settings.toml')
    result = runner.invoke(dasm.disasm, ['-c', str(config), '--no-hex', str(path)])

    assert result.exit_code == dasm.EXIT_OK
    assert result.output.splitlines()[0] == '0000: 7C01 0030  SET A, 48'


def test_log_level():
    assert dasm.log_level(DisasmSettings()) == logging.INFO
    assert dasm.log_level(DisasmSettings().update(verbose=True)) == logging.DEBUG
