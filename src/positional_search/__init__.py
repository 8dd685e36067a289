"""Boolean phrase search over a positional index with TF-IDF cosine ranking."""

from positional_search.search.engine import QueryEngine
from positional_search.search.index import PositionalIndex
from positional_search.search.models import RankedDocument, SearchResult


__all__ = ["PositionalIndex", "QueryEngine", "RankedDocument", "SearchResult"]
__version__ = "0.1.0"
