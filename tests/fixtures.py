# type: ignore
import pytest
from click.testing import CliRunner

from dcpu.disasm.tables import OpcodeTables


@pytest.fixture
def runner():
    yield CliRunner()


@pytest.fixture
def with_hex_file(tmp_path):
    def make(contents: str, name: str = 'program.hex'):
        path = tmp_path / name
        path.write_text(contents)
        return path

    yield make


@pytest.fixture
def with_set_only_tables():
    yield OpcodeTables(binary={0x01: 'SET'}, special={0x01: 'JSR'})
