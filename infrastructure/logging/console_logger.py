"""Infrastructure: console logging implementation"""
from domain import ILogger


class ConsoleLogger(ILogger):
    """Console logging implementation"""
    
    def info(self, message: str) -> None:
        print(message)
    
    def warning(self, message: str) -> None:
        print(f"⚠️ {message}")
    
    def error(self, message: str) -> None:
        print(f"❌ {message}")
