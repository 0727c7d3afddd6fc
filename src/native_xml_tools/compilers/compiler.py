"""Base class for report compilers."""

from abc import ABC, abstractmethod

from schemas.side_data import SideData


class Compiler(ABC):
    """Abstract base class for compilers of side-data reports.

    Compilers turn the side-data accumulated by the filter into documents
    for whoever prepares the destination journal.
    """

    @abstractmethod
    def compile(self, side_data: SideData) -> str:
        """Render a report from side-data.

        Args:
            side_data: Accumulated locales and genres

        Returns:
            The rendered report
        """
        pass
