# Book catalog: fixed in-memory collection with rating queries
from .domain import Book
from .exceptions import CatalogUnavailable
from .catalog import BookCatalog, load_catalog
from .sources import load_seed
from .validators import validate_record, validate_records

__all__ = [
    'Book', 'BookCatalog', 'CatalogUnavailable',
    'load_catalog', 'load_seed',
    'validate_record', 'validate_records',
]
