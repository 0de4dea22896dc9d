from .i_logger import ILogger

__all__ = ['ILogger']
