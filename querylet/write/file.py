"""Write output to a file."""

import logging

logger = logging.getLogger(__name__)


def to_file(query) -> None:
    """Write the query's output to its output filename, truncating the file.

    Does nothing if no filename is set. A file that cannot be opened is
    reported as a warning and skipped.
    """
    filename = query.output_filename
    if not filename:
        return

    output = query.output() or ""
    if isinstance(output, str):
        output = output.encode("utf-8")

    try:
        with open(filename, "wb") as output_file:
            output_file.write(output)
    except OSError as e:
        logger.warning(f"can't open {filename} for output: {e}")
        return
    logger.info(f"Wrote output to {filename}")
