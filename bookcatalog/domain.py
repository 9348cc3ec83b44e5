from dataclasses import dataclass
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class Book:
    title: str
    author: str
    rating: float

    def __post_init__(self):
        if not isinstance(self.title, str) or not self.title.strip():
            raise ValueError("Book title must be a non-empty string")
        if not isinstance(self.author, str):
            raise ValueError(f"Book author must be a string, got {type(self.author).__name__}")
        # bool is an int subclass, reject it explicitly
        if isinstance(self.rating, bool) or not isinstance(self.rating, (int, float)):
            raise ValueError(f"Book rating must be a number, got {self.rating!r}")
        try:
            rating = float(self.rating)
        except OverflowError as e:
            raise ValueError(f"Book rating is too large for a float: {e}") from e
        object.__setattr__(self, "rating", rating)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Book":
        """Create Book from a JSON record."""
        return cls(
            title=data["title"],
            author=data.get("author", ""),
            rating=data["rating"],
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "title": self.title,
            "author": self.author,
            "rating": self.rating,
        }
