"""Command-line entry point.

Usage::

    trailcode encode <input> <output>
    trailcode decode <input> <output>

File names are resolved under the data directory (``data/`` unless
``TRAILCODE_DATA_DIR`` is set). ``encode`` writes walking directions when the
output name ends in ``.txt`` and GeoJSON otherwise; ``decode`` reads GeoJSON
and writes the raw bytes.
"""

from __future__ import annotations

import sys

import structlog

from .decoder import decode_geojson
from .encoder import encode_to_geojson
from .errors import TrailcodeError
from .files import read_bytes, read_text, write_bytes, write_text
from .instructions import encode_to_instructions
from .settings import Settings

logger = structlog.get_logger(__name__)

USAGE = (
    "\nRequired arguments not found! Please run the program like this:\n\n"
    "\ttrailcode [encode|decode] [input filename] [output filename]\n"
)

MODES = ("encode", "decode")
INSTRUCTIONS_SUFFIX = ".txt"


def run_encode(in_file: str, out_file: str, settings: Settings) -> int:
    """Encode ``in_file`` and write the result. Returns the byte count."""
    data = read_bytes(in_file, settings.data_dir)
    if out_file.lower().endswith(INSTRUCTIONS_SUFFIX):
        write_text(out_file, encode_to_instructions(data), settings.data_dir)
        output_format = "instructions"
    else:
        write_text(out_file, encode_to_geojson(data, settings.start_point), settings.data_dir)
        output_format = "geojson"

    logger.info("encode_complete", bytes=len(data), output=out_file, format=output_format)
    return len(data)


def run_decode(in_file: str, out_file: str, settings: Settings) -> int:
    """Decode the GeoJSON in ``in_file`` and write the bytes. Returns the byte count."""
    data = decode_geojson(read_text(in_file, settings.data_dir))
    write_bytes(out_file, data, settings.data_dir)

    logger.info("decode_complete", bytes=len(data), output=out_file)
    return len(data)


def main(argv: list[str] | None = None, settings: Settings | None = None) -> int:
    """Run the CLI and return the process exit code."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 3 or args[0] not in MODES:
        print(USAGE)
        return 0

    structlog.configure(
        processors=[
            structlog.dev.ConsoleRenderer(),
        ],
    )
    settings = settings or Settings.from_env()
    mode, in_file, out_file = args

    try:
        if mode == "encode":
            run_encode(in_file, out_file, settings)
        else:
            run_decode(in_file, out_file, settings)
    except TrailcodeError as e:
        logger.error(f"{mode}_failed", error=str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
