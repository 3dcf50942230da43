"""Light sources of a scene and their construction from scene configuration."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from raytracer import logger
from raytracer.scene_values import Color, Vec3, get_color, get_vector3
from raytracer.yml_node import Node

AMBIENT = "ambient"
DIRECTIONAL = "directional"
POINTS = "points"

_MIN_SQUARED_DISTANCE = 0.01


def _vec(values: Sequence[float]) -> tuple[float, float, float]:
    x, y, z = (float(v) for v in values)
    return (x, y, z)


def _scale(vector: Sequence[float], factor: float) -> tuple[float, float, float]:
    return _vec(component * factor for component in vector)


@dataclass(frozen=True)
class LightSample:
    """What a light contributes at a point: color, direction to the light, distance."""

    color: Color
    direction: Vec3 = (0.0, 0.0, 0.0)
    distance: float = 0.0


class Light(ABC):
    """A light source that can be sampled at any point of the scene."""

    @abstractmethod
    def sample(self, point: Sequence[float]) -> LightSample:
        """The light arriving at ``point``."""

    def is_ambient(self) -> bool:
        """Whether the light lights everything equally, from no direction."""
        return False


class Ambient(Light):
    """Light that reaches every point equally."""

    def __init__(self, color: Sequence[float], intensity: float = 1.0) -> None:
        self.color = _vec(color)
        self.intensity = float(intensity)

    def sample(self, point: Sequence[float]) -> LightSample:
        return LightSample(_scale(self.color, self.intensity))

    def is_ambient(self) -> bool:
        return True


class Directional(Light):
    """Parallel light from far away, such as the sun; it does not fade."""

    def __init__(
        self,
        color: Sequence[float],
        direction: Sequence[float],
        intensity: float = 1.0,
    ) -> None:
        self.color = _vec(color)
        self.direction = _vec(direction)
        self.intensity = float(intensity)

    def sample(self, point: Sequence[float]) -> LightSample:
        return LightSample(
            _scale(self.color, self.intensity),
            _scale(self.direction, -1.0),
            math.inf,
        )


class PointLight(Light):
    """Light shining in all directions from one position, fading with the square of distance."""

    def __init__(
        self,
        color: Sequence[float],
        position: Sequence[float],
        intensity: float = 1.0,
    ) -> None:
        self.color = _vec(color)
        self.position = _vec(position)
        self.intensity = float(intensity)

    def sample(self, point: Sequence[float]) -> LightSample:
        delta = _vec(p - q for p, q in zip(self.position, _vec(point)))
        distance = math.sqrt(sum(c * c for c in delta))
        if distance == 0.0:
            direction = (math.nan, math.nan, math.nan)
        else:
            direction = _scale(delta, 1.0 / distance)
        falloff = 4 * math.pi * max(distance * distance, _MIN_SQUARED_DISTANCE)
        return LightSample(
            _scale(self.color, self.intensity / falloff), direction, distance
        )


def light_from_yml(node: Node, lights: list[Light]) -> Light | None:
    """Build the light a configuration node describes.

    A ``points`` node appends one point light per child to ``lights`` and
    returns a dark placeholder; an unknown node gives None.
    """
    if node.name == AMBIENT:
        return Ambient(get_color(node), float(node["intensity"].as_type(float)))
    if node.name == DIRECTIONAL:
        return Directional(get_color(node), get_vector3(node["direction"].children), 1)
    if node.name == POINTS:
        for point in node.children:
            lights.append(
                PointLight(
                    get_color(point),
                    get_vector3(point.children),
                    float(point["intensity"].as_type(float)),
                )
            )
            if logger.is_init():
                logger.debug(f"Added light point {point.name}.")
        return PointLight((0.0, 0.0, 0.0), (0.0, 0.0, 0.0), 0.0)
    if logger.is_init():
        logger.warn(f"Unknown light {node.name} ignoring.")
    return None