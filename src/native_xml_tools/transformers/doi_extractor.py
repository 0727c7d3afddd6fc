"""DOI Extractor for generating DOI import SQL from Native XML exports.

The destination database has no shared identifier with the export, so each
statement looks the publication up by its titles. The lookup is not scoped
to a journal: an unrelated publication with an identical title (in any
locale) can be matched, and several matches make the subselect return more
than one row.
"""

import logging
from collections.abc import Iterator

from lxml import etree

from native_xml_tools.sql import sql_literal
from native_xml_tools.xpath import XPathQuery

from .transformer import NativeXmlTransformer

logger = logging.getLogger(__name__)

INSERT_DOI_SQL = (
    "INSERT INTO publication_settings (publication_id, setting_name, setting_value, locale)\n"
    "SELECT (SELECT DISTINCT ps.publication_id FROM publication_settings ps "
    "WHERE ps.setting_name = 'title' AND ps.setting_value IN ({titles})) AS publication_id, "
    "'pub-id::doi' AS setting_name, {doi} AS setting_value, '' AS locale;\n\n"
)


class DoiExtractor(NativeXmlTransformer):
    """Extract the DOIs of current publications as SQL INSERT statements.

    Articles without a current publication, a DOI or a title are reported
    as warnings and skipped.
    """

    def transform(self, document: etree._ElementTree) -> list[str]:
        """Generate one DOI import statement per eligible article.

        Args:
            document: Parsed Native XML document

        Returns:
            SQL statements in article order
        """
        statements = list(self.extract(document))
        logger.info(f"Generated {len(statements)} DOI statements")
        return statements

    def extract(self, document: etree._ElementTree) -> Iterator[str]:
        """Yield DOI import statements as articles are processed."""
        query = XPathQuery(document)

        for index, article in enumerate(query.select("//pkp:article"), start=1):
            statement = self._build_statement(query, article, index)
            if statement is not None:
                yield statement

    def _build_statement(
        self,
        query: XPathQuery,
        article: etree._Element,
        index: int,
    ) -> str | None:
        """Build the statement for one article, or None when it must be skipped."""
        publication = self.find_current_publication(query, article)
        if publication is None:
            logger.warning(f"The article {index} has no publications")
            return None

        doi_element = query.select_first("pkp:id[@type = 'doi']", publication)
        doi = "".join(doi_element.itertext()).strip() if doi_element is not None else ""
        if not doi:
            logger.warning(f"The article {index} has no DOI")
            return None

        titles = [
            "".join(title.itertext())
            for title in query.select("pkp:title", publication)
        ]
        if not titles:
            logger.warning(f"The article {index} has no title")
            return None

        return INSERT_DOI_SQL.format(
            titles=", ".join(sql_literal(title) for title in titles),
            doi=sql_literal(doi),
        )
