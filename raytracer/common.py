"""Exit codes, program modes and small helpers shared across the renderer."""

from __future__ import annotations

import os
import re
import sys
import time
from enum import Enum, IntEnum

from raytracer import logger

EXIT_OK = 0
EXIT_KO = 84

CPU_INFO_PATH = "/sys/devices/system/cpu/online"
_DEFAULT_CPU_AMOUNT = 1
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_UINT64_MAX = 2**64 - 1


class Mode(Enum):
    """How the program runs."""

    SELF = "self"
    """Render the image alone."""
    SERVER = "server"
    """Lead a cluster of clients that render the image."""
    CLIENT = "client"
    """Render what a cluster server asks for."""


class LibraryType(IntEnum):
    """Magic numbers identifying the kind of a plug-in library."""

    IMAGE = 0x220405
    SHAPE = 0x130608
    LIGHT = 0x180125
    MATERIAL = 0x220325


def current_timestamp() -> int:
    """Milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def _swap_if_little(value: int) -> int:
    if not 0 <= value <= _UINT64_MAX:
        raise ValueError(f"not an unsigned 64-bit value: {value}")
    if sys.byteorder == "little":
        return int.from_bytes(value.to_bytes(8, "little"), "big")
    return value


def ntohll(value: int) -> int:
    """Convert a 64-bit value from network to host byte order."""
    return _swap_if_little(value)


def htonll(value: int) -> int:
    """Convert a 64-bit value from host to network byte order."""
    return _swap_if_little(value)


def nb_procs(cpu_info_path: str = CPU_INFO_PATH) -> int:
    """Number of online processors, read from a range such as ``0-7``."""
    if not os.path.exists(cpu_info_path):
        return _DEFAULT_CPU_AMOUNT
    try:
        with open(cpu_info_path, encoding="utf-8") as handle:
            content = handle.read()
    except OSError:
        if logger.is_init():
            logger.warn("Couldn't open cpu file info, disabling multithreading")
        return _DEFAULT_CPU_AMOUNT
    match = _LEADING_INT.match(content[2:])
    if match is None:
        raise ValueError(f"cannot read processor count from {content!r}")
    return int(match.group(1)) + 1