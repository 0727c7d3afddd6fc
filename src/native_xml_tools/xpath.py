"""XPath query engine over a parsed Native XML document.

Every expression is evaluated with the ``pkp`` and ``xlink`` namespace
prefixes bound, so callers can write ``pkp:article/pkp:publication`` without
passing a namespace map around. Values that come from the document itself
should be passed as XPath variables (``$name``) rather than formatted into
the expression.
"""

import logging
import re
from collections.abc import Iterator
from typing import Any

from lxml import etree

from .exceptions import QueryError

logger = logging.getLogger(__name__)

PKP_NS = "http://pkp.sfu.ca"
XLINK_NS = "http://www.w3.org/1999/xlink"

NAMESPACES = {
    "pkp": PKP_NS,
    "xlink": XLINK_NS,
}


class XPathQuery:
    """Evaluate XPath expressions against one document.

    Example:
        query = XPathQuery(etree.parse("export.xml"))
        for article in query.select("//pkp:article"):
            publication_id = article.get("current_publication_id")
    """

    def __init__(self, document: etree._ElementTree):
        """Initialize the query engine.

        Args:
            document: Parsed Native XML document
        """
        self.document = document

    def evaluate(self, path: str, context: Any = None, **variables) -> Any:
        """Evaluate an XPath expression and return the raw result.

        Args:
            path: XPath expression
            context: Optional context node (default: the document)
            **variables: Values bound to ``$name`` variables in the expression

        Returns:
            A list of nodes, or a string, number or boolean for scalar expressions

        Raises:
            QueryError: If lxml rejects the expression or the context
        """
        node = self.document if context is None else context
        try:
            return node.xpath(path, namespaces=NAMESPACES, **variables)
        except (etree.XPathError, AttributeError, TypeError) as e:
            raise QueryError(f"Cannot evaluate XPath '{path}': {e}", expression=path) from e

    def select(self, path: str, context: Any = None, **variables) -> Iterator[Any]:
        """Yield the nodes matching an XPath expression in document order."""
        result = self.evaluate(path, context, **variables)
        if not isinstance(result, list):
            raise QueryError(
                f"XPath '{path}' does not select nodes (got {type(result).__name__})",
                expression=path,
            )
        yield from result

    def select_first(self, path: str, context: Any = None, **variables) -> Any | None:
        """Return the first node matching an XPath expression, or None."""
        return next(self.select(path, context, **variables), None)

    def select_text(self, path: str, context: Any = None, **variables) -> str:
        """Return the string value of an expression, trimmed and tag stripped.

        The path is expected to target a single node.
        """
        value = self.evaluate(f"string({path})", context, **variables)
        return re.sub(r"<[^>]+>", "", str(value).strip()).strip()

    def remove(self, node: etree._Element) -> None:
        """Detach an element from its parent.

        The element's tail text goes with it; the parent's text and the other
        siblings are left as they are.
        """
        parent = node.getparent()
        if parent is None:
            raise QueryError("Cannot remove the document root", expression="/")
        parent.remove(node)
