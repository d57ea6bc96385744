"""decode a HID report descriptor into a JSON document"""

# Item format can be found here:
# https://www.usb.org/document-library/device-class-definition-hid-111
#
import logging
import sys
from typing import Optional

from .config import DecodeOptions
from .document import Document, Layout, layout_for, shape
from .errors import DestinationUnwritableError, SourceUnreadableError
from .protocol.items import ReportDescriptorItems
from .resolver import ResolvedItem, resolve_all
from .usage_tables import DEFAULT_USAGE_TABLES, UsageTables

LOGGER: logging.Logger = logging.getLogger('hid-decode')
LOGGER.addHandler(logging.NullHandler())  # in case wrapping application hasn't set a default handler

STDOUT: str = '-'


def read_descriptor(path: str) -> bytes:
    """read the report descriptor from a file"""
    try:
        with open(path, 'rb') as descriptor_file:
            data: bytes = descriptor_file.read()
    except OSError as os_error:
        raise SourceUnreadableError(f"cannot read '{path}': {os_error.strerror or os_error}", path=path) from os_error
    LOGGER.info(f"read {len(data)} bytes from {path}")
    return data


def decode_descriptor(data: bytes, options: Optional[DecodeOptions] = None,
                      tables: UsageTables = DEFAULT_USAGE_TABLES) -> Document:
    """decode the descriptor bytes, raises MalformedDescriptorError"""
    options = options or DecodeOptions()
    items: ReportDescriptorItems = ReportDescriptorItems(data)
    resolved: list[ResolvedItem] = resolve_all(items, tables)
    LOGGER.debug(f"decoded {len(resolved)} items from {len(data)} bytes")
    return shape(data, resolved, skip_data=options.skip_data)


def write_document(document: Document, layout: Layout, output_file: str = STDOUT) -> None:
    """write the document, '-' is stdout"""
    output: bytes = document.to_json(layout).encode('utf-8')
    try:
        if output_file == STDOUT:
            sys.stdout.buffer.write(output)
            sys.stdout.buffer.flush()
            return
        with open(output_file, 'wb') as json_file:
            json_file.write(output)
    except OSError as os_error:
        raise DestinationUnwritableError(f"cannot write '{output_file}': {os_error.strerror or os_error}") from os_error
    LOGGER.info(f"wrote {len(output)} bytes to {output_file}")


def hid_decode(path: str, output_file: str = STDOUT, options: Optional[DecodeOptions] = None) -> Document:
    """read, decode and write, nothing is written unless the decode succeeds"""
    options = options or DecodeOptions()
    document: Document = decode_descriptor(read_descriptor(path), options)
    write_document(document, layout_for(pretty=options.pretty, skip_data=options.skip_data), output_file)
    return document
