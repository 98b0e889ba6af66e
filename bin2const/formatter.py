from typing import Callable, List


DUMP_ROW_SIZE: int = 16


def _dump(binary: bytes, render: Callable[[int], str], width: int) -> str:
    out: List[str] = []

    for offset in range(0, len(binary), DUMP_ROW_SIZE):
        row = binary[offset:(offset + DUMP_ROW_SIZE)]
        out.append(f"{offset:08x}  ")

        # Byte columns, padded out to a full row and clustered by four.
        for slot in range(DUMP_ROW_SIZE):
            if slot < len(row):
                out.append(render(row[slot]) + " ")
            else:
                out.append(" " * (width + 1))
            if slot % 4 == 3:
                out.append(" ")

        # ASCII column, same padding rules.
        out.append(" |")
        for slot in range(DUMP_ROW_SIZE):
            if slot < len(row):
                char = row[slot]
                out.append(chr(char) if 0x20 <= char <= 0x7E else ".")
            else:
                out.append(" ")
        out.append("|\n")

    return "".join(out)


def binary_to_hex(binary: bytes) -> str:
    return _dump(binary, lambda b: f"{b:02x}", 2)


def binary_to_binary(binary: bytes) -> str:
    return _dump(binary, lambda b: f"{b:08b}", 8)


class SourceConstantStyle:
    """
    Everything that differs between two source constant declarations. The
    opening template is formatted with the keyword arguments ``name`` and
    ``size``, the rest are emitted verbatim.
    """

    def __init__(
        self,
        opening: str,
        closing: str,
        *,
        group_size: int = 16,
        line_break: str = "\n",
        name_transform: Callable[[str], str] = lambda name: name,
    ) -> None:
        self.opening = opening
        self.closing = closing
        self.group_size = group_size
        self.line_break = line_break
        self.name_transform = name_transform

    def __repr__(self) -> str:
        return (
            "SourceConstantStyle("
            f"opening={repr(self.opening)}, "
            f"closing={repr(self.closing)}, "
            f"group_size={self.group_size}, "
            f"line_break={repr(self.line_break)})"
        )

    def render(self, binary: bytes, name: str, tab_size: int) -> str:
        indent = " " * tab_size
        out: List[str] = [
            self.opening.format(name=self.name_transform(name), size=len(binary)),
            indent,
        ]

        last = len(binary) - 1
        for i, byte in enumerate(binary):
            out.append(f"0x{byte:02x}")
            if i == last:
                break

            out.append(", ")
            if i % self.group_size == self.group_size - 1:
                # Only wraps when there's another byte to put on the next line.
                out.append(self.line_break)
                out.append(indent)

        out.append(self.closing)
        return "".join(out)


C_STYLE = SourceConstantStyle(
    "const unsigned char {name}[] = {{\n",
    "\n};\n",
)
C_DEFINE_STYLE = SourceConstantStyle(
    "#define {name}_SIZE {size}\n#define {name} {{ \\\n",
    " \\\n}\n",
    group_size=8,
    line_break="\\\n",
    name_transform=lambda name: name.upper(),
)
RUST_STYLE = SourceConstantStyle(
    "const {name}: [u8; {size}] = [\n",
    "\n];\n",
)
PYTHON_STYLE = SourceConstantStyle(
    "{name} = bytes([\n",
    "\n])\n",
)
CSHARP_STYLE = SourceConstantStyle(
    "public static readonly byte[] {name} = new byte[] {{\n",
    "\n};\n",
)
JAVASCRIPT_STYLE = SourceConstantStyle(
    "const {name} = new Uint8Array([\n",
    "\n]);\n",
)
GO_STYLE = SourceConstantStyle(
    "var {name} = []byte{{\n",
    "\n}\n",
)
JAVA_STYLE = SourceConstantStyle(
    "public static final byte[] {name} = new byte[] {{\n",
    "\n};\n",
)


def binary_to_c_const(binary: bytes, name: str, tab_size: int) -> str:
    return C_STYLE.render(binary, name, tab_size)


def binary_to_c_define(binary: bytes, name: str, tab_size: int) -> str:
    return C_DEFINE_STYLE.render(binary, name, tab_size)


def binary_to_rust_const(binary: bytes, name: str, tab_size: int) -> str:
    return RUST_STYLE.render(binary, name, tab_size)


def binary_to_python_const(binary: bytes, name: str, tab_size: int) -> str:
    return PYTHON_STYLE.render(binary, name, tab_size)


def binary_to_csharp_const(binary: bytes, name: str, tab_size: int) -> str:
    return CSHARP_STYLE.render(binary, name, tab_size)


def binary_to_javascript_const(binary: bytes, name: str, tab_size: int) -> str:
    return JAVASCRIPT_STYLE.render(binary, name, tab_size)


def binary_to_go_const(binary: bytes, name: str, tab_size: int) -> str:
    return GO_STYLE.render(binary, name, tab_size)


def binary_to_java_const(binary: bytes, name: str, tab_size: int) -> str:
    return JAVA_STYLE.render(binary, name, tab_size)
