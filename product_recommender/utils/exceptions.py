class RecommenderError(Exception):
    """Base exception for the project."""

class DataLoadError(RecommenderError):
    """Raised when the product catalog file cannot be read."""

class CatalogSchemaError(DataLoadError):
    """Raised when a catalog record is missing fields or has wrongly typed ones."""

    def __init__(self, index: int, problem: str) -> None:
        super().__init__(f"Malformed product record #{index}: {problem}")
        self.index = index
        self.problem = problem
