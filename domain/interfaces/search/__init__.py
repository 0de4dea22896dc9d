from .i_search_client import ISearchClient

__all__ = ['ISearchClient']
