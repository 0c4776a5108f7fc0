"""Microcontroller core API helpers: binary names, bit math, number formatting, ring buffers, strings, printers, IPv4 addresses and streams."""

__version__ = "1.0.0"

__all__ = [
    "binary",
    "common",
    "conversions",
    "ring_buffer",
    "string_algorithms",
    "printing",
    "arduino_string",
    "ip_address",
    "stream",
]