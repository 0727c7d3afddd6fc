"""Instructions Compiler for the pre-import checklist of stripped exports.

Renders the steps an operator must follow before importing stripped
Native XML files: the locales to enable in the destination journal and a
SQL script that creates any genre the imported submission files use.
"""

import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from native_xml_tools.sql import FILTERS
from schemas.side_data import SideData

from .compiler import Compiler

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent.parent / "resources" / "templates"


class InstructionsCompiler(Compiler):
    """Compile pre-import instructions from accumulated side-data.

    The genre script inserts, for the journal whose path is ``journal``,
    every recorded genre that has no ``name`` setting yet. New genres get
    sequence numbers after the journal's current maximum, in genre name
    order.

    Attributes:
        journal: Path of the destination journal
        template_name: Name of the Jinja2 template file
    """

    def __init__(
        self,
        journal: str,
        template_name: str = "instructions.md.j2",
        templates_dir: Path | None = None,
    ):
        """Initialize the instructions compiler.

        Args:
            journal: Path of the destination journal
            template_name: Name of the Jinja2 template file
            templates_dir: Directory containing templates (default: resources/templates)
        """
        self.journal = journal
        self.template_name = template_name
        self.templates_dir = templates_dir or TEMPLATES_DIR

        self._env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
        )
        for name, func in FILTERS.items():
            self._env.filters[name] = func

    def compile(self, side_data: SideData) -> str:
        """Render the instructions document.

        Args:
            side_data: Accumulated locales and genres

        Returns:
            The instructions as Markdown text
        """
        template = self._env.get_template(self.template_name)
        return template.render(
            journal=self.journal,
            locales=side_data.locales,
            genres=side_data.genres,
        )

    def write(self, path: Path, side_data: SideData) -> None:
        """Render the instructions document and write it to ``path``."""
        path.write_text(self.compile(side_data), encoding="utf-8")
        logger.info(f"Wrote import instructions to {path}")
