from .i_download_strategy import IDownloadStrategy

__all__ = ['IDownloadStrategy']
