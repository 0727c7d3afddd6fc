"""Tools for preparing OJS Native XML exports for import."""
