"""Shared utilities: wall-clock helpers for generation counters."""

from gencache.shared.utils.clock import GenerationClock, generation_clock, utc_now_ms

__all__ = ["GenerationClock", "generation_clock", "utc_now_ms"]
