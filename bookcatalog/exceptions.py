"""
Exceptions raised by the book catalog.
"""


class CatalogUnavailable(Exception):
    """The catalog could not be initialized from its data source."""
