from .console_logger import ConsoleLogger

__all__ = ['ConsoleLogger']
