"""Ray tracer building blocks: YML scene reading, logging, images, PPM output and lights."""

__version__ = "0.1.0"