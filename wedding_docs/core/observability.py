"""Tracing for the export pipeline.

Spans are sent to Langfuse only when ``LANGFUSE_PUBLIC_KEY`` is configured.
Without a key, ``observe`` leaves the decorated function untouched, so
aggregation and rendering run with zero tracing overhead.
"""

import logging

from wedding_docs.core.config import settings

logger = logging.getLogger(__name__)

# The SDK warns on every span when keys are missing or partial
logging.getLogger("langfuse").setLevel(logging.ERROR)


def _untraced(name: str = "", **_options):
    """Stand-in for ``langfuse.observe`` that returns the function as is."""

    def passthrough(fn):
        return fn

    return passthrough


if settings.langfuse_public_key:
    from langfuse import observe

    logger.info("Langfuse tracing enabled for document exports")
else:
    observe = _untraced


__all__ = ["observe"]
