from .content_fetcher_impl import ContentFetcherImpl

__all__ = ['ContentFetcherImpl']
