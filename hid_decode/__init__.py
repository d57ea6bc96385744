"""definitions for hid-decode interface"""
from . import version
from .classifier import ItemCategory, ItemName, classify
from .config import DecodeOptions, OutputFormat
from .decoder import decode_descriptor, hid_decode, read_descriptor, write_document
from .document import Document, JsonDescriptor, JsonItem, Layout, layout_for
from .errors import (DestinationUnwritableError, HIDDecodeError, HIDDecodeValueError,
                     MalformedDescriptorError, SourceUnreadableError)
from .protocol.items import ReportDescriptorItems, TokenizedItem
from .resolver import Annotations, CollectionKind, ResolverState, resolve, resolve_all
from .usage_tables import UsageTables

PACKAGE_NAME: str = 'hid-decode'

__versions__: str = version.get_version(PACKAGE_NAME)

__all__: list[str] = [
    'hid_decode',  # read, decode & write in one go
    'decode_descriptor',  # bytes -> Document
    'read_descriptor',
    'write_document',
    'DecodeOptions',
    'OutputFormat',
    'Document',
    'JsonDescriptor',
    'JsonItem',
    'Layout',
    'layout_for',

    # pipeline stages
    'ReportDescriptorItems',
    'TokenizedItem',
    'ItemCategory',
    'ItemName',
    'classify',
    'ResolverState',
    'Annotations',
    'CollectionKind',
    'resolve',
    'resolve_all',
    'UsageTables',

    # exceptions
    'HIDDecodeError',
    'HIDDecodeValueError',
    'SourceUnreadableError',
    'MalformedDescriptorError',
    'DestinationUnwritableError',
]
