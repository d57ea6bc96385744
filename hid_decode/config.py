"""options controlling how a descriptor is decoded and presented"""
from dataclasses import dataclass
from enum import Enum
from os import getenv

from .errors import HIDDecodeValueError


class OutputFormat(Enum):
    """supported output formats"""

    JSON_V1 = 'json-v1'


def is_truthy(key: str, default: bool) -> bool:
    """read environment variable, return boolean response"""
    value: str = getenv(key, default=str(default)).upper()
    return value in ['TRUE', '1', '1.0']


@dataclass(frozen=True)
class DecodeOptions:
    """decode settings, all default to off"""

    skip_data: bool = False  # omit the descriptor and item bytes, implies pretty
    pretty: bool = False  # indented output
    output_format: OutputFormat = OutputFormat.JSON_V1

    @classmethod
    def from_env(cls) -> "DecodeOptions":
        """defaults taken from HID_DECODE_SKIP_DATA and HID_DECODE_PRETTY"""
        return cls(skip_data=is_truthy('HID_DECODE_SKIP_DATA', False),
                   pretty=is_truthy('HID_DECODE_PRETTY', False))

    @staticmethod
    def parse_format(name: str) -> OutputFormat:
        """convert a format name, e.g. 'json-v1'"""
        try:
            return OutputFormat(name)
        except ValueError as value_error:
            choices: str = ", ".join(item.value for item in OutputFormat)
            raise HIDDecodeValueError(f"unsupported format '{name}', expected one of: {choices}") from value_error
