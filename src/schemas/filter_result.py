"""Result of a Native XML filter run."""

from dataclasses import dataclass

from lxml import etree

from .side_data import SideData


@dataclass
class FilterResult:
    """The stripped document and what was removed from it.

    Attributes:
        document: The filtered document (modified in place)
        side_data: Accumulated locales and genres, or None when accumulation is disabled
        articles: Number of articles processed
        removed_publications: Number of non-current publications removed
        removed_submission_files: Number of orphaned submission files removed
        removed_files: Number of superseded file revisions removed
    """

    document: etree._ElementTree
    side_data: SideData | None = None
    articles: int = 0
    removed_publications: int = 0
    removed_submission_files: int = 0
    removed_files: int = 0
