import unittest
from typing import Dict, List

from bin2const.conversion import (
    CONVERSION_ALIASES,
    ConversionException,
    ConversionTypeEnum,
    UnknownConversionException,
    convert,
    resolve_conversion,
)
from bin2const.formatter import binary_to_csharp_const, binary_to_hex, binary_to_binary


ALIAS_GROUPS: Dict[ConversionTypeEnum, List[str]] = {
    ConversionTypeEnum.CONVERSION_BINARY: ["bin", "binary", "raw"],
    ConversionTypeEnum.CONVERSION_HEX: ["hex", "hexadecimal", "hexa", "hexa-decimal", "hexa_decimal"],
    ConversionTypeEnum.CONVERSION_C: ["c", "cpp", "c++", "cxx", "h", "hpp", "h++", "hxx"],
    ConversionTypeEnum.CONVERSION_C_DEFINE: ["cdef", "c-def", "c_def", "def", "define", "cppdef"],
    ConversionTypeEnum.CONVERSION_RUST: ["rust", "rs", "rustlang", "rust-lang"],
    ConversionTypeEnum.CONVERSION_CSHARP: ["csharp", "cs", "c#", "c-sharp", "c_sharp"],
    ConversionTypeEnum.CONVERSION_PYTHON: ["python", "py", "python3", "py3", "python_3"],
    ConversionTypeEnum.CONVERSION_JAVASCRIPT: ["javascript", "js", "typescript", "ts"],
    ConversionTypeEnum.CONVERSION_GO: ["go", "golang"],
    ConversionTypeEnum.CONVERSION_JAVA: ["java"],
}


class TestResolveConversion(unittest.TestCase):
    def test_alias_table(self) -> None:
        expected = {alias: conversion for conversion, aliases in ALIAS_GROUPS.items() for alias in aliases}
        self.assertEqual(dict(CONVERSION_ALIASES), expected)

    def test_alias_table_is_immutable(self) -> None:
        with self.assertRaises(TypeError):
            CONVERSION_ALIASES["asm"] = ConversionTypeEnum.CONVERSION_C  # type: ignore

    def test_normalizes_case_and_whitespace(self) -> None:
        self.assertEqual(resolve_conversion("C#"), ConversionTypeEnum.CONVERSION_CSHARP)
        self.assertEqual(resolve_conversion("  c#\t"), ConversionTypeEnum.CONVERSION_CSHARP)
        self.assertEqual(resolve_conversion(" C-Sharp "), ConversionTypeEnum.CONVERSION_CSHARP)
        self.assertEqual(resolve_conversion("HEXA_DECIMAL"), ConversionTypeEnum.CONVERSION_HEX)

    def test_unknown(self) -> None:
        with self.assertRaises(UnknownConversionException) as context:
            resolve_conversion("xyz")
        self.assertEqual(context.exception.selector, "xyz")
        self.assertEqual(str(context.exception), "Unknown conversion type: xyz")
        self.assertIsInstance(context.exception, ConversionException)

    def test_unknown_keeps_original_selector(self) -> None:
        with self.assertRaises(UnknownConversionException) as context:
            resolve_conversion(" Pascal ")
        self.assertEqual(context.exception.selector, " Pascal ")

    def test_extra_aliases(self) -> None:
        extra = {"header": ConversionTypeEnum.CONVERSION_C}
        self.assertEqual(resolve_conversion("Header", extra), ConversionTypeEnum.CONVERSION_C)
        with self.assertRaises(UnknownConversionException):
            resolve_conversion("header")

    def test_builtin_aliases_win(self) -> None:
        extra = {"c": ConversionTypeEnum.CONVERSION_RUST}
        self.assertEqual(resolve_conversion("c", extra), ConversionTypeEnum.CONVERSION_C)


class TestConvert(unittest.TestCase):
    def test_aliases_in_group_render_identically(self) -> None:
        data = bytes(range(40))
        for aliases in ALIAS_GROUPS.values():
            outputs = {
                convert(data, "blob", resolve_conversion(alias), 3)
                for alias in aliases
            }
            self.assertEqual(len(outputs), 1)

    def test_dumps_ignore_name_and_tab_size(self) -> None:
        data = b"hello, world"
        self.assertEqual(convert(data, "ignored", ConversionTypeEnum.CONVERSION_HEX, 8), binary_to_hex(data))
        self.assertEqual(convert(data, "other", ConversionTypeEnum.CONVERSION_BINARY, 0), binary_to_binary(data))

    def test_dispatches_to_formatter(self) -> None:
        data = b"\x01\x02"
        self.assertEqual(
            convert(data, "Blob", resolve_conversion(" C# ")),
            binary_to_csharp_const(data, "Blob", 4),
        )

    def test_every_kind_is_convertible(self) -> None:
        for conversion in ConversionTypeEnum:
            self.assertTrue(convert(b"\x00", "blob", conversion).endswith("\n"))
