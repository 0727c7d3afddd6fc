"""Options controlling the Native XML filter."""

from pydantic import BaseModel


class FilterOptions(BaseModel):
    """Overrides applied while stripping a Native XML document.

    Attributes:
        uploader: Username written to the ``uploader`` attribute of every
            retained submission file; the existing value is kept when None
        author_user_group: User group written to the ``user_group_ref``
            attribute of the current publication's authors; kept when None
        journal: Path of the destination journal, used by the genre
            provisioning script
    """

    uploader: str | None = None
    author_user_group: str | None = None
    journal: str | None = None
