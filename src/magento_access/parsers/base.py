"""Shared XML parsing for Magento REST responses."""

import logging
import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import BinaryIO, Generic, TypeVar

from magento_access.exceptions import MagentoParseError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def element_text(element: ET.Element, tag: str) -> str | None:
    """Stripped text of the ``tag`` child, or None when missing or blank."""
    child = element.find(tag)
    if child is None or child.text is None:
        return None
    text = child.text.strip()
    return text or None


def element_decimal(element: ET.Element, tag: str) -> Decimal | None:
    """Decimal value of the ``tag`` child; accepts "," or "." as separator."""
    text = element_text(element, tag)
    if text is None:
        return None
    return Decimal(text.replace(",", "."))


def element_bool(element: ET.Element, tag: str) -> bool | None:
    """Magento flags are serialized as 0/1."""
    text = element_text(element, tag)
    if text is None:
        return None
    return text.lower() not in ("0", "false", "")


def data_items(element: ET.Element | None) -> list[ET.Element]:
    """Child elements of a Magento collection node."""
    if element is None:
        return []
    return list(element)


class MagentoResponseParser(ABC, Generic[T]):
    """Turns a Magento REST XML response stream into a typed model.

    Subclasses implement ``parse_root``. Any failure while reading the
    document surfaces as MagentoParseError with the raw payload attached.
    """

    resource: str = "resource"

    def parse(self, stream: BinaryIO, keep_stream_position: bool = True) -> T:
        """Parse the XML document in ``stream``.

        Args:
            stream: Binary stream positioned at the start of the document
            keep_stream_position: Rewind the stream to where it started
                once parsing succeeds

        Raises:
            MagentoParseError: If the body is not the expected XML
        """
        start = stream.tell()
        raw = stream.read()

        try:
            root = ET.fromstring(raw)
            result = self.parse_root(root)
        except (ET.ParseError, ValueError, ArithmeticError) as e:
            payload = raw.decode("utf-8", errors="replace")
            logger.debug("Failed to parse %s response: %s", self.resource, e)
            raise MagentoParseError(f"Can't parse {self.resource} response: {e}", payload=payload) from e

        if keep_stream_position:
            stream.seek(start)

        return result

    @abstractmethod
    def parse_root(self, root: ET.Element) -> T:
        """Map the parsed document root to the response model."""
