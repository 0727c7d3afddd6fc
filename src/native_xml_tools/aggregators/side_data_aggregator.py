"""Side-data Aggregator for merging locales and genres across filter runs."""

import logging
from pathlib import Path

from pydantic import ValidationError

from schemas.side_data import SideData

logger = logging.getLogger(__name__)

DEFAULT_SIDE_DATA_PATH = Path("data.json")


class SideDataAggregator:
    """Persists side-data so several exports can share one provisioning step.

    Each run loads what previous runs recorded, the filter adds to it, and
    the full merged set replaces the file contents.

    Example:
        aggregator = SideDataAggregator(Path("data.json"))
        side_data = aggregator.load()
        NativeXmlFilter().transform(document, side_data)
        aggregator.save(side_data)
    """

    def __init__(self, path: Path = DEFAULT_SIDE_DATA_PATH):
        """Initialize the aggregator.

        Args:
            path: Location of the side-data JSON file
        """
        self.path = path

    def load(self) -> SideData:
        """Load previously recorded side-data.

        Returns:
            The stored SideData, or an empty one when the file is absent or malformed
        """
        if not self.path.exists():
            logger.debug(f"No side-data at {self.path}, starting empty")
            return SideData()

        try:
            side_data = SideData.model_validate_json(self.path.read_text(encoding="utf-8"))
        except (ValidationError, UnicodeDecodeError) as e:
            logger.warning(f"Ignoring malformed side-data in {self.path}: {e}")
            return SideData()

        # Stored lists may carry duplicates if the file was edited by hand
        return SideData().merge(side_data)

    def save(self, side_data: SideData) -> None:
        """Replace the side-data file with the given sets."""
        self.path.write_text(side_data.model_dump_json(indent=4), encoding="utf-8")
        logger.info(
            f"Wrote side-data to {self.path} "
            f"({len(side_data.locales)} locales, {len(side_data.genres)} genres)"
        )
