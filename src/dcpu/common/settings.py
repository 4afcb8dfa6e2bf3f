from pathlib import Path
import logging as lg
import tomllib


class ConfigError(Exception):
    pass


class DisasmSettings:
    verbose: bool
    listing: bool
    hex_words: bool

    KEYS = ('listing', 'hex_words')

    def __init__(self):
        self.verbose = False
        self.listing = False
        self.hex_words = False

    def update(
        self,
        verbose: bool | None = None,
        listing: bool | None = None,
        hex_words: bool | None = None
    ):
        if verbose is not None:
            self.verbose = verbose

        if listing is not None:
            self.listing = listing

        if hex_words is not None:
            self.hex_words = hex_words

        return self


def load_settings(config_path: Path, settings: DisasmSettings | None = None) -> DisasmSettings:
    ''' Reads the [disasm] table of a TOML file

        [disasm]
        listing = true
        hex_words = false
    '''
    if settings is None:
        settings = DisasmSettings()

    try:
        config = tomllib.loads(config_path.read_text())
    except OSError as e:
        raise ConfigError(f'Unable to read config {config_path}: {e}') from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f'Malformed config {config_path}: {e}') from e

    section = config.get('disasm', {})

    if not isinstance(section, dict):
        raise ConfigError('[disasm] must be a table')

    for key, value in section.items():
        if key not in DisasmSettings.KEYS:
            raise ConfigError(f'Unknown setting {key}')

        if not isinstance(value, bool):
            raise ConfigError(f'Setting {key} must be true or false')

    lg.debug(f'Config {config_path}: {section}')
    return settings.update(**section)
