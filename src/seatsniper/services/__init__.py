"""Supporting services for the ingestion path."""

from seatsniper.services.rate_limiter import (
    RateLimiter,
    build_platform_limiters,
    create_daily_rate_limiter,
    create_minute_rate_limiter,
)

__all__ = [
    "RateLimiter",
    "build_platform_limiters",
    "create_daily_rate_limiter",
    "create_minute_rate_limiter",
]
