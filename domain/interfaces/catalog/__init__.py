from .i_video_catalog import IVideoCatalog

__all__ = ['IVideoCatalog']
