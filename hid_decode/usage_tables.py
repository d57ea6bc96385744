"""lookup of usage page and usage names in the HID Usage Tables"""
import logging
from typing import Optional

from hidtools.hut import HUT

LOGGER: logging.Logger = logging.getLogger('hid-decode')


class UsageTables:
    """resolves numeric usage pages and usages to their HID Usage Table names"""

    def __init__(self, hut=HUT):
        """the usage table to consult, defaults to the one shipped with hid-tools"""
        self._hut = hut

    def usage_page_name(self, usage_page: int) -> Optional[str]:
        """name of a usage page, None if the page is not in the tables"""
        try:
            return self._hut[usage_page].page_name
        except KeyError:
            return None

    def usage_name(self, usage_page: int, usage: int) -> Optional[str]:
        """name of a usage within a page, None if either is not in the tables"""
        try:
            return self._hut[usage_page][usage].name
        except KeyError:
            LOGGER.debug(f"no name for usage 0x{usage:x} on page 0x{usage_page:04x}")
            return None


DEFAULT_USAGE_TABLES: UsageTables = UsageTables()
