from enum import Enum
from types import MappingProxyType
from typing import Callable, Dict, Mapping, Optional

from bin2const.formatter import (
    binary_to_binary,
    binary_to_hex,
    binary_to_c_const,
    binary_to_c_define,
    binary_to_rust_const,
    binary_to_python_const,
    binary_to_csharp_const,
    binary_to_javascript_const,
    binary_to_go_const,
    binary_to_java_const,
)


class ConversionException(Exception):
    pass


class UnknownConversionException(ConversionException):
    def __init__(self, selector: str) -> None:
        super().__init__(f"Unknown conversion type: {selector}")
        self.selector = selector


class ConversionTypeEnum(Enum):
    CONVERSION_BINARY = "binary"
    CONVERSION_HEX = "hex"
    CONVERSION_C = "c"
    CONVERSION_C_DEFINE = "cdef"
    CONVERSION_RUST = "rust"
    CONVERSION_CSHARP = "csharp"
    CONVERSION_PYTHON = "python"
    CONVERSION_JAVASCRIPT = "javascript"
    CONVERSION_GO = "go"
    CONVERSION_JAVA = "java"


def _aliases(conversion: ConversionTypeEnum, *selectors: str) -> Dict[str, ConversionTypeEnum]:
    return {selector: conversion for selector in selectors}


CONVERSION_ALIASES: Mapping[str, ConversionTypeEnum] = MappingProxyType({
    **_aliases(ConversionTypeEnum.CONVERSION_BINARY, "bin", "binary", "raw"),
    **_aliases(ConversionTypeEnum.CONVERSION_HEX, "hex", "hexadecimal", "hexa", "hexa-decimal", "hexa_decimal"),
    **_aliases(ConversionTypeEnum.CONVERSION_C, "c", "cpp", "c++", "cxx", "h", "hpp", "h++", "hxx"),
    **_aliases(ConversionTypeEnum.CONVERSION_C_DEFINE, "cdef", "c-def", "c_def", "def", "define", "cppdef"),
    **_aliases(ConversionTypeEnum.CONVERSION_RUST, "rust", "rs", "rustlang", "rust-lang"),
    **_aliases(ConversionTypeEnum.CONVERSION_CSHARP, "csharp", "cs", "c#", "c-sharp", "c_sharp"),
    **_aliases(ConversionTypeEnum.CONVERSION_PYTHON, "python", "py", "python3", "py3", "python_3"),
    **_aliases(ConversionTypeEnum.CONVERSION_JAVASCRIPT, "javascript", "js", "typescript", "ts"),
    **_aliases(ConversionTypeEnum.CONVERSION_GO, "go", "golang"),
    **_aliases(ConversionTypeEnum.CONVERSION_JAVA, "java"),
})


# Dump conversions ignore the constant name and indentation.
_CONVERTERS: Mapping[ConversionTypeEnum, Callable[[bytes, str, int], str]] = MappingProxyType({
    ConversionTypeEnum.CONVERSION_BINARY: lambda binary, name, tab_size: binary_to_binary(binary),
    ConversionTypeEnum.CONVERSION_HEX: lambda binary, name, tab_size: binary_to_hex(binary),
    ConversionTypeEnum.CONVERSION_C: binary_to_c_const,
    ConversionTypeEnum.CONVERSION_C_DEFINE: binary_to_c_define,
    ConversionTypeEnum.CONVERSION_RUST: binary_to_rust_const,
    ConversionTypeEnum.CONVERSION_CSHARP: binary_to_csharp_const,
    ConversionTypeEnum.CONVERSION_PYTHON: binary_to_python_const,
    ConversionTypeEnum.CONVERSION_JAVASCRIPT: binary_to_javascript_const,
    ConversionTypeEnum.CONVERSION_GO: binary_to_go_const,
    ConversionTypeEnum.CONVERSION_JAVA: binary_to_java_const,
})


def normalize_selector(selector: str) -> str:
    return selector.strip().lower()


def resolve_conversion(
    selector: str,
    extra_aliases: Optional[Mapping[str, ConversionTypeEnum]] = None,
) -> ConversionTypeEnum:
    normalized = normalize_selector(selector)
    if normalized in CONVERSION_ALIASES:
        return CONVERSION_ALIASES[normalized]
    if extra_aliases is not None and normalized in extra_aliases:
        return extra_aliases[normalized]
    raise UnknownConversionException(selector)


def convert(
    binary: bytes,
    name: str,
    conversion: ConversionTypeEnum,
    tab_size: int = 4,
) -> str:
    return _CONVERTERS[conversion](binary, name, tab_size)
