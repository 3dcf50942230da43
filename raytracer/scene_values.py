"""Reading colors and 3D vectors out of scene configuration nodes."""

from __future__ import annotations

from typing import Union

from raytracer import logger
from raytracer.yml_node import Node, Tree

Color = tuple[float, float, float]
Vec3 = tuple[float, float, float]

WHITE: Color = (1.0, 1.0, 1.0)
ORIGIN: Vec3 = (0.0, 0.0, 0.0)


def _warn(message: str) -> None:
    if logger.is_init():
        logger.warn(message)


def _children(config: Union[Node, Tree]) -> Tree:
    return config.children if isinstance(config, Node) else config


def _hex_channel(text: str, start: int) -> float:
    piece = text[start:start + 2]
    try:
        return int(piece, 16) / 255.0
    except ValueError:
        raise ValueError(f"invalid color component {piece!r} in {text!r}") from None


def get_color(config: Union[Node, Tree]) -> Color:
    """Read the ``color`` entry, written as ``"#RRGGBB"``; white if absent."""
    tree = _children(config)
    if "color" not in tree:
        _warn("No color specified, falling back to white")
        return WHITE
    text = str(tree["color"].as_type(str))
    # The first two characters are the opening quote and the '#'.
    return (_hex_channel(text, 2), _hex_channel(text, 4), _hex_channel(text, 6))


def get_vector3(config: Union[Node, Tree]) -> Vec3:
    """Read the ``x``, ``y`` and ``z`` entries; missing ones count as zero."""
    tree = _children(config)
    found = [axis for axis in ("x", "y", "z") if axis in tree]
    if not found:
        _warn("No coordinates specified, falling back to (0, 0, 0).")
    x, y, z = (
        float(tree[axis].as_type(float)) if axis in tree else 0.0
        for axis in ("x", "y", "z")
    )
    return (x, y, z)