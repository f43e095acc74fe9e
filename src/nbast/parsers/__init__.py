#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Notebook parsers."""

from nbast.parsers.ipynb import IpynbParser, parse, parse_from_file, parse_from_string

__all__ = ["IpynbParser", "parse", "parse_from_file", "parse_from_string"]
