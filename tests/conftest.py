import pytest

from bookcatalog.catalog import BookCatalog
from bookcatalog.domain import Book
from bookcatalog.settings import DEFAULT_SEED_PATH


@pytest.fixture
def catalog():
    """A fresh catalog built from the bundled seed for every test"""
    return BookCatalog.from_json(DEFAULT_SEED_PATH)


@pytest.fixture
def sample_books():
    return [
        Book("Dune", "Frank Herbert", 4.3),
        Book("Solaris", "Stanisław Lem", 4.0),
        Book("Neuromancer", "William Gibson", 3.9),
        Book("Hyperion", "Dan Simmons", 4.3),
        Book("Foundation", "Isaac Asimov", 4.0),
    ]


@pytest.fixture
def seed_file(tmp_path):
    """Write a seed file and return its path"""

    def write(content: str):
        path = tmp_path / "seed.json"
        path.write_text(content, encoding="utf-8")
        return path

    return write
