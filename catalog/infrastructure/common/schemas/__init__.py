from .response_wrappers import ResultEnvelope

__all__ = ["ResultEnvelope"]
