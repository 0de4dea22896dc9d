from abc import ABC, abstractmethod

class ILogger(ABC):
    """Logging interface shared by services and playback components"""
    @abstractmethod
    def info(self, message: str) -> None:
        pass
    
    @abstractmethod
    def warning(self, message: str) -> None:
        """Degraded but recoverable condition"""
        pass
    
    @abstractmethod
    def error(self, message: str) -> None:
        pass
