import yaml
from typing import Any, Dict, Optional

from bin2const.conversion import ConversionTypeEnum, CONVERSION_ALIASES, UnknownConversionException, normalize_selector, resolve_conversion


DEFAULT_TAB_SIZE: int = 4


class ConfigException(Exception):
    pass


class Config:
    def __init__(
        self,
        tab_size: int,
        verbose: bool,
        aliases: Dict[str, ConversionTypeEnum],
    ) -> None:
        self.tab_size = tab_size
        self.verbose = verbose
        self.aliases = aliases

    def __repr__(self) -> str:
        return (
            "Config("
            f"tab_size={self.tab_size}, "
            f"verbose={self.verbose}, "
            f"aliases={repr(self.aliases)})"
        )

    @staticmethod
    def default() -> "Config":
        return Config(
            tab_size=DEFAULT_TAB_SIZE,
            verbose=False,
            aliases={},
        )


def parse_tab_size(value: Any, default: int = DEFAULT_TAB_SIZE) -> int:
    # Anything that isn't a non-negative integer silently becomes the default.
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value if value >= 0 else default
    if isinstance(value, str):
        # Only plain ASCII digits, no signs, padding or underscores.
        if not (value.isascii() and value.isdigit()):
            return default
        return int(value)
    return default


def config_parse(data: Any) -> Config:
    config = Config.default()
    if data is None:
        return config
    if not isinstance(data, dict):
        raise ConfigException("Config file must contain a mapping of settings!")

    if 'tab_size' in data:
        config.tab_size = parse_tab_size(data['tab_size'])
    if 'verbose' in data:
        if isinstance(data['verbose'], bool):
            config.verbose = data['verbose']
    if 'aliases' in data:
        aliases = data['aliases']
        if not isinstance(aliases, dict):
            raise ConfigException("Config aliases must be a mapping of alias to conversion type!")

        for alias, target in aliases.items():
            alias = normalize_selector(str(alias))
            if alias in CONVERSION_ALIASES:
                # Built-in selectors always win.
                continue
            try:
                config.aliases[alias] = resolve_conversion(str(target))
            except UnknownConversionException:
                raise ConfigException(f"Alias {alias} points at unknown conversion type {target}!")

    return config


def config_load(config_file: Optional[str]) -> Config:
    if config_file is None:
        return Config.default()

    try:
        with open(config_file, "r", encoding="utf-8") as fp:
            data = yaml.safe_load(fp)
    except FileNotFoundError:
        data = None
    except yaml.YAMLError as e:
        raise ConfigException(f"Could not parse config file {config_file}: {str(e)}")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigException(f"Could not read config file {config_file}: {str(e)}")

    return config_parse(data)
