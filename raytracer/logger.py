"""Levelled logging to the console, a timestamped log file and a latest-log file."""

from __future__ import annotations

import inspect
import os
import platform
import random
import sys
import threading
from datetime import datetime
from enum import IntEnum
from typing import IO, Sequence

LOG_DIR = "logs"
LATEST_FILENAME = "latest.log"

COLOR_RESET = "\033[0m"
COLOR_RED = "\033[31m"
COLOR_YELLOW = "\033[33m"
COLOR_BLUE = "\033[34m"
COLOR_BRIGHT_BLACK = "\033[90m"
COLOR_BRIGHT_RED = "\033[91m"
COLOR_FATAL = "\033[41;97m"

_HEADER_TOP = "╔══════════════════━━━━━━━━╍╍╍╍╍"
_HEADER_BOTTOM = "╚══════════════════━━━━━━━━╍╍╍╍╍"

QUOTES: tuple[str, ...] = (
    "Every pixel is a small story about light",
    "Shadows are just light that took a detour",
    "A ray goes out, a colour comes back",
    "Bounce once for truth, bounce twice for beauty",
    "Somewhere a photon is still looking for a surface",
    "The camera only sees what the light allows",
    "Patience: the last tile is always the slowest",
    "Mirrors never lie, they only reflect",
    "Even the darkest scene has an ambient glow",
    "Trace the ray, find the way",
)

_LOCK = threading.RLock()
_instance: Logger | None = None


class LoggerFileError(OSError):
    """A log file could not be opened."""

    def __init__(self, filepath: str) -> None:
        super().__init__(f'Could not open file: "{filepath}"')
        self.filepath = filepath


class Level(IntEnum):
    """Severity of a log message; messages below the minimum are dropped."""

    DEBUG = 0
    INFO = 1
    ERROR = 2
    WARNING = 3
    CRITICAL = 4
    FATAL = 5


_LEVEL_COLORS = {
    Level.DEBUG: COLOR_BLUE,
    Level.WARNING: COLOR_YELLOW,
    Level.ERROR: COLOR_BRIGHT_RED,
    Level.CRITICAL: COLOR_RED,
    Level.FATAL: COLOR_FATAL,
}


def level_to_string(level: Level) -> str:
    """Name of a level, or UNKNOWN for anything that is not one."""
    try:
        return Level(level).name
    except ValueError:
        return "UNKNOWN"


def colored_level(level: Level) -> str:
    """The level name in angle brackets, coloured for a terminal."""
    color = _LEVEL_COLORS.get(level, "")
    return f"{color}<{level_to_string(level)}>{COLOR_RESET}"


def formatted_timestamp(for_filename: bool = False) -> str:
    """Current local time, with milliseconds, or in a form fit for a file name."""
    now = datetime.now()
    if for_filename:
        return now.strftime("%Y-%m-%d_%H-%M-%S")
    return f"{now.strftime('%Y-%m-%d %H:%M:%S')}.{now.microsecond // 1000:03d}"


def formatted_location(filename: str, line: int, colorized: bool = True) -> str:
    """The place a message came from, as ``(file:line)``."""
    text = f"({filename}:{line})"
    if colorized:
        return f"{COLOR_BRIGHT_BLACK}{text}{COLOR_RESET}"
    return text


def generate_log_file(project_name: str, log_dir: str = LOG_DIR) -> str:
    """Path of a new log file named after the project and the current time."""
    return f"{log_dir}/{project_name}-{formatted_timestamp(True)}.log"


def random_quote() -> str:
    """One quote, picked at random."""
    return random.choice(QUOTES)


def _os_name() -> str:
    try:
        with open("/etc/os-release", encoding="utf-8") as handle:
            for line in handle:
                line = line.rstrip("\n")
                if line.startswith("NAME="):
                    return line[6:-1]
    except OSError:
        pass
    return "Unknown"


def _kernel_name() -> str:
    return platform.release() or "Unknown"


def _caller_location() -> tuple[str, int]:
    frame = inspect.currentframe()
    try:
        while frame is not None and frame.f_code.co_filename == __file__:
            frame = frame.f_back
        if frame is None:
            return ("<unknown>", 0)
        return (frame.f_code.co_filename, frame.f_lineno)
    finally:
        del frame


class Logger:
    """Writes messages to the console, to its own log file and to the latest log."""

    def __init__(
        self,
        filepath: str,
        minimum_level: Level = Level.INFO,
        log_dir: str = LOG_DIR,
    ) -> None:
        self.minimum_level = Level(minimum_level)
        os.makedirs(log_dir, exist_ok=True)
        try:
            self._log_file: IO[str] = open(filepath, "a", encoding="utf-8")
        except OSError:
            raise LoggerFileError(filepath) from None
        latest = os.path.join(log_dir, LATEST_FILENAME)
        try:
            self._latest_file: IO[str] = open(latest, "w", encoding="utf-8")
        except OSError:
            self._log_file.close()
            raise LoggerFileError(latest) from None

    def _write_files(self, text: str) -> None:
        for handle in (self._log_file, self._latest_file):
            if not handle.closed:
                handle.write(text)
                handle.flush()

    def write(
        self,
        level: Level,
        message: str,
        location: tuple[str, int] | None = None,
    ) -> None:
        """Log a message if its level reaches the minimum level."""
        if level < self.minimum_level:
            return
        filename, line = location if location is not None else _caller_location()
        timestamp = formatted_timestamp()
        full_message = (
            f"[{timestamp}] <{level_to_string(level)}> {message} "
            f"{formatted_location(filename, line, False)}\n"
        )
        console_message = (
            f"{COLOR_BRIGHT_BLACK}[{timestamp}] {COLOR_RESET}"
            f"{colored_level(level)} {message} "
            f"{formatted_location(filename, line)}\n"
        )
        with _LOCK:
            console = sys.stderr if level >= Level.ERROR else sys.stdout
            console.write(console_message)
            self._write_files(full_message)

    def write_header(self, project_name: str, argv: Sequence[str]) -> None:
        """Write the banner describing the run to both log files."""
        lines = [
            _HEADER_TOP,
            f"║ LOG FILE - {project_name}",
            "║",
            f"║ Datetime: {formatted_timestamp()}",
            f"║ Command: {' '.join(argv)}",
            f"║ OS: {_os_name()}",
            f"║ Kernel: {_kernel_name()}",
            f"║ Minimum log level: {level_to_string(self.minimum_level)}",
            "║",
            f"║ {random_quote()}",
            _HEADER_BOTTOM,
            "",
        ]
        with _LOCK:
            self._write_files("\n".join(lines) + "\n")

    def close(self) -> None:
        """Close both log files."""
        for handle in (self._log_file, self._latest_file):
            if not handle.closed:
                handle.close()

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def init(
    project_name: str,
    argv: Sequence[str] | None = None,
    minimum_level: Level = Level.INFO,
    log_dir: str = LOG_DIR,
) -> None:
    """Create the shared logger once and write its header; later calls do nothing."""
    global _instance
    with _LOCK:
        if _instance is None:
            instance = Logger(
                generate_log_file(project_name, log_dir), minimum_level, log_dir
            )
            instance.write_header(project_name, sys.argv if argv is None else argv)
            _instance = instance


def is_init() -> bool:
    """Whether the shared logger exists."""
    return _instance is not None


def get_instance() -> Logger:
    """The shared logger; raises RuntimeError if it was never initialised."""
    with _LOCK:
        if _instance is None:
            raise RuntimeError("Logger not initialized! Call init() first.")
        return _instance


def shutdown() -> None:
    """Close the shared logger and forget it."""
    global _instance
    with _LOCK:
        if _instance is not None:
            _instance.close()
            _instance = None


def log(level: Level, message: str) -> None:
    """Log a message through the shared logger."""
    get_instance().write(level, message, _caller_location())


def debug(message: str) -> None:
    """Log at DEBUG level."""
    log(Level.DEBUG, message)


def info(message: str) -> None:
    """Log at INFO level."""
    log(Level.INFO, message)


def warn(message: str) -> None:
    """Log at WARNING level."""
    log(Level.WARNING, message)


def error(message: str) -> None:
    """Log at ERROR level."""
    log(Level.ERROR, message)


def critical(message: str) -> None:
    """Log at CRITICAL level."""
    log(Level.CRITICAL, message)


def fatal(message: str) -> None:
    """Log at FATAL level."""
    log(Level.FATAL, message)