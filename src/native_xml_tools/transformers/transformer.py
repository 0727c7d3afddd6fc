"""Base class for Native XML transformers.

Transformers walk the articles of a parsed Native XML document. There are two:

- NativeXmlFilter: strips non-published data from the document in place
- DoiExtractor: reads each current publication's DOI and emits SQL
"""

from abc import ABC, abstractmethod
from typing import Any

from lxml import etree

from native_xml_tools.xpath import XPathQuery


class NativeXmlTransformer(ABC):
    """Abstract base class for transformers over a Native XML document."""

    @abstractmethod
    def transform(self, document: etree._ElementTree) -> Any:
        """Process a Native XML document.

        Args:
            document: Parsed Native XML document

        Returns:
            The transformer's result
        """
        pass

    def find_current_publication(
        self, query: XPathQuery, article: etree._Element
    ) -> etree._Element | None:
        """Return the publication whose <id> equals the article's current_publication_id."""
        publication_id = article.get("current_publication_id", "")
        return query.select_first(
            "pkp:publication[pkp:id = $publication_id]",
            article,
            publication_id=publication_id,
        )
