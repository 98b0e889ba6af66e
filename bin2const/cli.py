import argparse
import sys
from typing import List, Optional

from arcadeutils import FileBytes
from bin2const.config import ConfigException, config_load, parse_tab_size
from bin2const.conversion import UnknownConversionException, convert, resolve_conversion
from bin2const.log import debug, set_verbose


def read_binary(filename: str) -> bytes:
    with open(filename, "rb") as fp:
        data = FileBytes(fp)

        # Formatters want the whole thing in memory, so materialize it before
        # the file goes away.
        return bytes(data[0:len(data)])


def write_output(filename: str, out: str) -> None:
    with open(filename, "w", encoding="utf-8", newline="") as fp:
        fp.write(out)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bin2const",
        description="Utility for converting binary files to hex dumps or source code constants.",
    )
    parser.add_argument(
        'input_file',
        metavar='INPUT_FILE',
        type=str,
        nargs='?',
        help='The binary file to convert.',
    )
    parser.add_argument(
        'name',
        metavar='OUTPUT_CONST_NAME',
        type=str,
        nargs='?',
        help='The name of the constant to generate. Has no effect for bin or hex conversions.',
    )
    parser.add_argument(
        'conversion',
        metavar='CONVERSION_TYPE',
        type=str,
        nargs='?',
        help=(
            'The type of conversion to use. Can be bin, hex, c, cdef, rust, csharp, python, '
            'javascript, go or java, as well as most of their aliases.'
        ),
    )
    parser.add_argument(
        'tab_size',
        metavar='TAB_SIZE',
        type=str,
        nargs='?',
        help='The number of spaces to indent generated constants with. Defaults to 4.',
    )
    parser.add_argument(
        'output_file',
        metavar='OUTPUT_FILE',
        type=str,
        nargs='?',
        help='The file to write the output to. If not specified, the output is printed to stdout.',
    )
    parser.add_argument(
        'extra',
        nargs='*',
        help=argparse.SUPPRESS,
    )
    parser.add_argument(
        '--config',
        metavar='CONFIG',
        type=str,
        default=None,
        help='A YAML file providing default tab size, verbosity and extra conversion aliases.',
    )
    parser.add_argument(
        '--verbose',
        action="store_true",
        help='Display verbose debugging information on stderr.',
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.input_file is None or args.name is None or args.conversion is None:
        # Not enough to do anything useful, so just explain ourselves.
        parser.print_help(sys.stdout)
        return 0

    try:
        config = config_load(args.config)
    except ConfigException as e:
        print(f"Could not load config {args.config}: {str(e)}", file=sys.stderr)
        return 0
    set_verbose(args.verbose or config.verbose)

    tab_size = config.tab_size
    if args.tab_size is not None:
        tab_size = parse_tab_size(args.tab_size, default=config.tab_size)

    try:
        binary = read_binary(args.input_file)
    except OSError as e:
        print(f"Could not read {args.input_file}: {str(e)}", file=sys.stderr)
        return 0
    debug(f"Read {len(binary)} bytes from {args.input_file}.")

    try:
        conversion = resolve_conversion(args.conversion, config.aliases)
    except UnknownConversionException as e:
        print(str(e), file=sys.stderr)
        return 0
    debug(f"Converting using {conversion.value} with a tab size of {tab_size}.")

    out = convert(binary, args.name, conversion, tab_size)

    if args.output_file is None:
        print(out)
    else:
        try:
            write_output(args.output_file, out)
        except OSError as e:
            print(f"Could not write {args.output_file}: {str(e)}", file=sys.stderr)
            return 0
        debug(f"Wrote {len(out)} characters to {args.output_file}.")

    return 0
