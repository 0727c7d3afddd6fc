"""Native XML Filter for stripping non-published data from OJS exports.

Removes every publication except the current one, the submission files
that the current publication does not reference, and every superseded file
revision. Optionally rewrites ownership metadata and accumulates the
locales and genres the destination journal must provide before import.
"""

import logging

from lxml import etree

from native_xml_tools.exceptions import MissingFileRevisionError, MissingPublicationError
from native_xml_tools.xpath import XPathQuery
from schemas.filter_result import FilterResult
from schemas.options import FilterOptions
from schemas.side_data import SideData

from .transformer import NativeXmlTransformer

logger = logging.getLogger(__name__)


class NativeXmlFilter(NativeXmlTransformer):
    """Strip a Native XML document down to its published content.

    The NativeXmlFilter, for each article:
    1. Resolves the current publication (fatal when missing)
    2. Removes every other publication
    3. Removes submission files not referenced by the current publication's galleys
    4. Applies the uploader override and records genres of the retained files
    5. Keeps only the file revision each retained submission file points to
    6. Applies the author user group override

    When side-data is given, every locale used in the document is recorded
    once all articles have been processed.

    Attributes:
        options: Uploader and author user group overrides
    """

    def __init__(self, options: FilterOptions | None = None):
        """Initialize the filter.

        Args:
            options: Overrides to apply (default: keep existing values)
        """
        self.options = options or FilterOptions()

    def transform(
        self,
        document: etree._ElementTree,
        side_data: SideData | None = None,
    ) -> FilterResult:
        """Strip non-published data from a document in place.

        Args:
            document: Parsed Native XML document
            side_data: Accumulator for locales and genres; None disables accumulation

        Returns:
            FilterResult with the filtered document, side-data and removal counts

        Raises:
            MissingPublicationError: If an article has no current publication
            MissingFileRevisionError: If a submission file's file_id has no <file> entry
        """
        query = XPathQuery(document)
        result = FilterResult(document=document, side_data=side_data)

        for index, article in enumerate(query.select("//pkp:article"), start=1):
            self._filter_article(query, article, index, result)
            result.articles += 1

        if side_data is not None:
            for locale in query.select("//@locale"):
                side_data.add_locale(str(locale))

        logger.info(
            f"Filtered {result.articles} articles: removed "
            f"{result.removed_publications} publications, "
            f"{result.removed_submission_files} submission files and "
            f"{result.removed_files} file revisions"
        )
        return result

    def _filter_article(
        self,
        query: XPathQuery,
        article: etree._Element,
        index: int,
        result: FilterResult,
    ) -> None:
        """Strip a single article.

        Args:
            query: Query engine over the document
            article: The <article> element
            index: 1-based position of the article in the document
            result: Result being accumulated
        """
        publication_id = article.get("current_publication_id")
        current_publication = self.find_current_publication(query, article)
        if current_publication is None:
            raise MissingPublicationError(
                f"Article {index} has no publication with id {publication_id!r}",
                publication_id=publication_id,
            )

        stale_publications = [
            publication
            for publication in query.select("pkp:publication", article)
            if publication is not current_publication
        ]
        for publication in stale_publications:
            query.remove(publication)
        result.removed_publications += len(stale_publications)

        submission_file_ids = {
            str(file_id)
            for file_id in query.select(
                "pkp:article_galley/pkp:submission_file_ref/@id", current_publication
            )
        }

        for submission_file in list(query.select("pkp:submission_file", article)):
            if not self._is_referenced(query, submission_file, submission_file_ids):
                query.remove(submission_file)
                result.removed_submission_files += 1
                continue

            if self.options.uploader:
                submission_file.set("uploader", self.options.uploader)

            if result.side_data is not None:
                result.side_data.add_genre(submission_file.get("genre", ""))

            result.removed_files += self._keep_current_file(query, submission_file)

        if self.options.author_user_group:
            for author in query.select("pkp:authors/pkp:author", current_publication):
                author.set("user_group_ref", self.options.author_user_group)

        logger.debug(f"Filtered article {index} (current publication {publication_id})")

    def _is_referenced(
        self,
        query: XPathQuery,
        submission_file: etree._Element,
        submission_file_ids: set[str],
    ) -> bool:
        """Check whether the current publication references a submission file.

        Dependent entries carry a <submission_file_ref> to the file that owns
        them and are kept when the owner is referenced; other entries are
        kept when their own id is referenced.
        """
        owner_id = query.select_first("pkp:submission_file_ref/@id", submission_file)
        if owner_id is not None:
            return str(owner_id) in submission_file_ids
        return submission_file.get("id") in submission_file_ids

    def _keep_current_file(self, query: XPathQuery, submission_file: etree._Element) -> int:
        """Remove every <file> revision except the one named by file_id.

        Returns:
            Number of revisions removed

        Raises:
            MissingFileRevisionError: If no <file> matches the file_id attribute
        """
        file_id = submission_file.get("file_id", "")
        current_file = query.select_first(
            "pkp:file[@id = $file_id]", submission_file, file_id=file_id
        )
        if current_file is None:
            raise MissingFileRevisionError(
                f"The <file> entry with id {file_id!r} of submission file "
                f"{submission_file.get('id')!r} was not found",
                submission_file_id=submission_file.get("id"),
                file_id=file_id,
            )

        stale_files = [
            file
            for file in query.select("pkp:file", submission_file)
            if file is not current_file
        ]
        for file in stale_files:
            query.remove(file)
        return len(stale_files)
