"""Process settings read from the environment."""

import os

DEFAULT_TOKEN_SECRET = "change-me"
DEFAULT_TOKEN_TTL = 60 * 60 * 8  # 8 hours
DEFAULT_NOTIFICATION_WORKERS = 4


def token_secret() -> str:
    return os.getenv("AUTH_TOKEN_SECRET", DEFAULT_TOKEN_SECRET)


def token_ttl() -> int:
    return int(os.getenv("AUTH_TOKEN_TTL", DEFAULT_TOKEN_TTL))


def notification_workers() -> int:
    """Size of the notification worker pool, never below one."""
    return max(1, int(os.getenv("NOTIFICATION_WORKERS", DEFAULT_NOTIFICATION_WORKERS)))
