#!/usr/bin/env python3
"""Basic usage example for trailcode.

Demonstrates encoding bytes into a geodesic walk and decoding it back.

Usage:
    python examples/basic_usage.py
"""

import os
import sys

# Add parent directory to path for direct script execution
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from trailcode.decoder import decode_geojson
from trailcode.encoder import encode, encode_to_geojson
from trailcode.files import byte_diff
from trailcode.instructions import encode_to_instructions
from trailcode.renderer import render_svg


def example_basic_roundtrip():
    """Encode a message to GeoJSON and decode it back."""
    print("=" * 60)
    print("Example 1: Basic Encode/Decode Roundtrip")
    print("=" * 60)

    data = b"Meet me by the old oak"
    print(f"  Input data:  {data!r}")

    geojson = encode_to_geojson(data)
    print(f"  GeoJSON:     {len(geojson)} characters")

    decoded = decode_geojson(geojson)
    print(f"  Decoded:     {decoded!r}")
    print(f"  Match:       {decoded == data}")
    print()


def example_instructions():
    """Print walking directions for a short message."""
    print("=" * 60)
    print("Example 2: Walking Directions")
    print("=" * 60)

    for line in encode_to_instructions(b"Hi!").splitlines():
        print(f"  {line}")
    print()


def example_corruption():
    """Show that a moved coordinate silently changes the decoded bytes."""
    print("=" * 60)
    print("Example 3: Corrupted Coordinates")
    print("=" * 60)

    data = b"fragile"
    path = encode(data)
    geojson = encode_to_geojson(data).replace(
        repr(path.points[3].lon), repr(path.points[3].lon + 0.0001)
    )
    decoded = decode_geojson(geojson)
    for position, expected, actual in byte_diff(data, decoded):
        print(f"  byte {position}: expected {expected}, got {actual}")
    print()


def example_preview():
    """Render an SVG preview of the walk."""
    print("=" * 60)
    print("Example 4: SVG Preview")
    print("=" * 60)

    svg = render_svg(encode(bytes(range(256))), size=256)
    print(f"  SVG size:    {len(svg)} characters")
    print()


if __name__ == "__main__":
    example_basic_roundtrip()
    example_instructions()
    example_corruption()
    example_preview()
