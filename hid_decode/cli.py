"""command line interface, hid-decode [options] path"""
import argparse
import logging
import sys
from dataclasses import replace
from typing import Optional

from . import version
from .config import DecodeOptions
from .decoder import STDOUT, hid_decode
from .errors import HIDDecodeError, HIDDecodeValueError

LOG_FORMAT: str = '%(asctime)s\t%(levelname)s \t[%(filename)s:%(lineno)d] - %(message)s'
LOGGER: logging.Logger = logging.getLogger('hid-decode')


def build_parser() -> argparse.ArgumentParser:
    """arguments for the command line"""
    parser = argparse.ArgumentParser(
        prog="hid-decode",
        description="Decode a HID report descriptor into JSON",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Print debugging information")
    parser.add_argument("--pretty", action="store_true", help="Indent the JSON output")
    parser.add_argument(
        "--skip-data",
        action="store_true",
        help="Don't include the data values for the descriptor and items in the JSON output. "
        "This option is primarily used for debugging to make it easier to read the output. Implies --pretty",
    )
    parser.add_argument("--output-file", default=STDOUT, help="Write the JSON to this file, '-' is stdout")
    parser.add_argument("--format", default="json-v1", help="Output format, only json-v1 is supported")
    parser.add_argument("--version", action="version", version=f"%(prog)s {version.get_version('hid-decode')}")
    parser.add_argument("path", help="Path to a hid report descriptor file")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """run the decode, returns the exit status"""
    args = build_parser().parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT, stream=sys.stderr)

    try:
        options: DecodeOptions = DecodeOptions.from_env()
        options = replace(options,
                          skip_data=options.skip_data or args.skip_data,
                          pretty=options.pretty or args.pretty,
                          output_format=DecodeOptions.parse_format(args.format))
        hid_decode(args.path, output_file=args.output_file, options=options)
    except (HIDDecodeError, HIDDecodeValueError) as decode_error:
        LOGGER.debug(f"decode of {args.path} failed: {decode_error!r}")
        print(f"Error: {decode_error}", file=sys.stderr)
        return 1
    return 0


def run() -> None:
    """console script entry point"""
    sys.exit(main())
