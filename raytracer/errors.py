"""Errors raised by the renderer, its network layer and its command line."""

from __future__ import annotations

import os


class RaytracerError(Exception):
    """Base class of every error the renderer raises."""


class ClientDisconnected(RaytracerError):
    """The peer behind a file descriptor went away."""

    def __init__(self, fd: int) -> None:
        super().__init__(f"{fd}: Client disconnected.")
        self.fd = fd


class ConnectionFail(RaytracerError):
    """A connection to a server could not be made."""

    def __init__(self, port: int, address: str, error_message: str) -> None:
        super().__init__(
            f"Couldn't Connect to {address} on port {port} : {error_message}.\n"
        )
        self.port = port
        self.address = address


class CouldNotOpenLibrary(RaytracerError):
    """A plug-in library could not be opened."""

    def __init__(self, error: str) -> None:
        super().__init__(f"Could not open library: {error}")


class CouldNotReadLibraryFunction(RaytracerError):
    """A function could not be read from a plug-in library."""

    def __init__(self, function_name: str, error_message: str) -> None:
        super().__init__(
            f"{function_name}: Could not read library function.\n{error_message}"
        )
        self.function_name = function_name


class EmptyByteBuffer(RaytracerError):
    """A byte buffer held no data."""

    def __init__(self) -> None:
        super().__init__("Got an empty ByteBuffer")


class EmptyPacket(RaytracerError):
    """A packet with no content was received."""

    def __init__(self) -> None:
        super().__init__("Empty Packet received.\n")


class Huh(RaytracerError):
    """Something that should never happen happened."""

    def __init__(self) -> None:
        super().__init__("Huh?")


class InvalidLibraryFormat(RaytracerError):
    """A plug-in library does not have the expected format."""

    def __init__(self) -> None:
        super().__init__("Wrong library format.")


class InvalidPacketSize(RaytracerError):
    """A packet is larger than allowed."""

    def __init__(self, size: int, max_size: int) -> None:
        super().__init__(
            f"Invalid packet size, got {size} but max is {max_size}."
        )
        self.size = size
        self.max_size = max_size


class InvalidUsage(RaytracerError):
    """The command line was used wrongly."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid usage: {reason}.\nUse --help flag for help.")
        self.reason = reason


class OutOfBounds(RaytracerError, IndexError):
    """An index lies outside the data it addresses."""

    def __init__(self, value: int) -> None:
        super().__init__(f"Out of bounds: {value}")
        self.value = value


class ServerDisconnected(RaytracerError):
    """The server went away."""

    def __init__(self) -> None:
        super().__init__("Server disconnected.\n")


class SocketFail(RaytracerError):
    """A socket could not be created."""

    def __init__(self, error_message: str) -> None:
        super().__init__(f"Couldn't create socket: {error_message}.\n")


class StandardFunctionFail(RaytracerError):
    """A system call failed; the message carries the system's description."""

    def __init__(self, function_name: str, errno_value: int = 0) -> None:
        super().__init__(
            f"Standard function fail: {function_name}: {os.strerror(errno_value)}"
        )
        self.function_name = function_name
        self.errno_value = errno_value


class UnknownFlag(RaytracerError):
    """A command-line flag is not known."""

    def __init__(self, flag: str) -> None:
        super().__init__(f"Unknown flag: {flag}.\nUse --help flag for help.")
        self.flag = flag


class UnknownPacket(RaytracerError):
    """A packet of an unregistered kind was handled."""

    def __init__(self) -> None:
        super().__init__("Tried to handle an unknown/unregistered packet.")


class ValueOverflow(RaytracerError):
    """A value does not fit where it has to go."""

    def __init__(self, value: int) -> None:
        super().__init__(f"Value overflow: {value}")
        self.value = value