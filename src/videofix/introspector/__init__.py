"""Introspector module for videofix.

This module provides media introspection capabilities:

- MediaIntrospector: Protocol defining the introspection interface
- FFprobeIntrospector: Production implementation using ffprobe
- parse_ffprobe_output: Smart constructor for FileMetadata
- MediaIntrospectionError: Exception for introspection failures
"""

from videofix.introspector.ffprobe import FFprobeIntrospector
from videofix.introspector.interface import (
    MediaIntrospectionError,
    MediaIntrospector,
    StreamCountError,
    StreamFieldError,
)
from videofix.introspector.parsers import parse_ffprobe_output

__all__ = [
    "FFprobeIntrospector",
    "MediaIntrospectionError",
    "MediaIntrospector",
    "StreamCountError",
    "StreamFieldError",
    "parse_ffprobe_output",
]
