from bin2const.config import Config, ConfigException, config_load, parse_tab_size
from bin2const.conversion import (
    ConversionException,
    UnknownConversionException,
    ConversionTypeEnum,
    CONVERSION_ALIASES,
    resolve_conversion,
    convert,
)
from bin2const.formatter import (
    SourceConstantStyle,
    binary_to_hex,
    binary_to_binary,
    binary_to_c_const,
    binary_to_c_define,
    binary_to_rust_const,
    binary_to_python_const,
    binary_to_csharp_const,
    binary_to_javascript_const,
    binary_to_go_const,
    binary_to_java_const,
)

__all__ = [
    "Config",
    "ConfigException",
    "config_load",
    "parse_tab_size",
    "ConversionException",
    "UnknownConversionException",
    "ConversionTypeEnum",
    "CONVERSION_ALIASES",
    "resolve_conversion",
    "convert",
    "SourceConstantStyle",
    "binary_to_hex",
    "binary_to_binary",
    "binary_to_c_const",
    "binary_to_c_define",
    "binary_to_rust_const",
    "binary_to_python_const",
    "binary_to_csharp_const",
    "binary_to_javascript_const",
    "binary_to_go_const",
    "binary_to_java_const",
]
