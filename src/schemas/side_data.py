"""Side-data accumulated across filter runs.

Side-data records the locales and submission file genres seen in one or
more stripped exports, so the destination journal can be prepared once
before all of them are imported.

File structure (data.json):
    {
      "locales": ["en", "pt_BR"],
      "genres": ["Article Text", "Image"]
    }
"""

from pydantic import BaseModel


class SideData(BaseModel):
    """Locales and genres observed in stripped Native XML documents.

    Both lists behave as insertion-ordered sets: adding a value that is
    already present is a no-op.

    Attributes:
        locales: Locale codes found in any ``locale`` attribute
        genres: Genre names of the retained submission files
    """

    locales: list[str] = []
    genres: list[str] = []

    def add_locale(self, locale: str) -> None:
        """Record a locale code unless it is already present."""
        if locale and locale not in self.locales:
            self.locales.append(locale)

    def add_genre(self, genre: str) -> None:
        """Record a genre name unless it is already present."""
        if genre and genre not in self.genres:
            self.genres.append(genre)

    def merge(self, other: "SideData") -> "SideData":
        """Add every locale and genre of another side-data set to this one.

        Args:
            other: Side-data to merge in

        Returns:
            This instance, for chaining
        """
        for locale in other.locales:
            self.add_locale(locale)
        for genre in other.genres:
            self.add_genre(genre)
        return self
