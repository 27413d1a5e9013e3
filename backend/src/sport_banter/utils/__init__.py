from .rate_limiter import RateLimiter, RateLimitStats

__all__ = ['RateLimiter', 'RateLimitStats']
