"""Reading and writing Native XML documents and SQL output.

Paths may be given as ``-`` to read from stdin or write to stdout.
"""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

from lxml import etree

logger = logging.getLogger(__name__)

STDIO = "-"


def load_document(source: str | Path) -> etree._ElementTree:
    """Parse a Native XML document fully into memory.

    Args:
        source: File path, or "-" to read from stdin

    Returns:
        The parsed document

    Raises:
        lxml.etree.XMLSyntaxError: If the input is not well-formed XML
    """
    parser = etree.XMLParser(huge_tree=True, ns_clean=True)
    if str(source) == STDIO:
        logger.debug("Reading document from stdin")
        return etree.parse(sys.stdin.buffer, parser)

    logger.debug(f"Reading document from {source}")
    return etree.parse(str(source), parser)


def write_document(document: etree._ElementTree, target: str | Path) -> None:
    """Serialize a document with an XML declaration in UTF-8.

    Args:
        document: Document to serialize
        target: File path, or "-" to write to stdout
    """
    content = etree.tostring(document, xml_declaration=True, encoding="UTF-8")
    if str(target) == STDIO:
        sys.stdout.buffer.write(content)
        sys.stdout.buffer.flush()
        return

    Path(target).write_bytes(content)
    logger.debug(f"Wrote document to {target}")


@contextmanager
def open_sql_output(target: str | Path) -> Iterator[TextIO]:
    """Open the SQL output for appending.

    Repeated runs against the same file accumulate their statements.

    Args:
        target: File path, or "-" to write to stdout

    Yields:
        A text stream to write statements to
    """
    if str(target) == STDIO:
        yield sys.stdout
        sys.stdout.flush()
        return

    with open(target, "a", encoding="utf-8") as output:
        yield output
