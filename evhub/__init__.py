"""evhub - synchronous publish/subscribe mixin with reciprocal cleanup."""

from evhub.hub import EventHub
from evhub.hub import detach_subscriber

__all__ = ["EventHub", "__version__", "detach_subscriber"]
__version__ = "0.1.0"
