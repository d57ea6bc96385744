"""exceptions raised while decoding a report descriptor"""
from typing import Optional


class HIDDecodeError(Exception):
    """base for all hid-decode errors"""

    def __init__(self, detail: str):
        """our basic exception"""
        self.detail: str = detail
        super().__init__(detail)

    def __str__(self) -> str:
        """return our details"""
        return self.detail


class HIDDecodeValueError(ValueError):
    """wrapper for issues with an option value"""


class SourceUnreadableError(HIDDecodeError):
    """the report descriptor could not be read"""

    def __init__(self, detail: str, path: Optional[str] = None):
        """remember which source failed"""
        self.path: Optional[str] = path
        super().__init__(detail=detail)


class MalformedDescriptorError(HIDDecodeError):
    """the bytes do not form a valid sequence of items"""

    def __init__(self, detail: str, offset: int = 0):
        """offset of the item that could not be tokenized"""
        self.offset: int = offset
        super().__init__(detail=f"{detail} at offset {offset}")


class DestinationUnwritableError(HIDDecodeError):
    """the decoded document could not be written"""
