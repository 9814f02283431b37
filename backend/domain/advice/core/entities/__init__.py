from .advice_cache import AdviceCache

__all__ = ["AdviceCache"]
