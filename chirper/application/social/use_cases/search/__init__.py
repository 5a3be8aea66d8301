from .search_use_case import SearchResult, SearchUseCase

__all__ = ["SearchResult", "SearchUseCase"]
