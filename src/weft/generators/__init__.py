"""weft generators.

Generators consume the node stream and produce output through sinks.

Available:
- Generator: the protocol the engine drives
- BaseGenerator: no-op defaults to subclass

"""

from weft.generators.base import BaseGenerator
from weft.generators.protocol import Generator

__all__ = ["BaseGenerator", "Generator"]
