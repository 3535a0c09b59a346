from .request_pacer import IRequestPacer
from .transit_api import ITransitApi

__all__ = [
    "IRequestPacer",
    "ITransitApi",
]
