"""gencache: generational read-through cache over Redis.

Invalidation is done by advancing generation counters embedded in the
physical keys, never by deleting or scanning keys.
"""

__version__ = "1.0.0"
