from .signal_hub import SignalHub

__all__ = ['SignalHub']
