"""Infrastructure: Redis-backed generational cache."""
