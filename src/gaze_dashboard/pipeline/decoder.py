import logging

from gaze_dashboard.models.gaze import RawRecord

logger = logging.getLogger(__name__)


def decode_records(text: str) -> list[RawRecord]:
    """
    Splits export text into field-keyed records.

    The first line is the header. Every following line, including a trailing
    empty one, becomes one record keyed by the stripped header names. Fields
    are split on bare commas (no quoting), zipped by position: values past the
    header are ignored, and keys without a value are left out of the record.
    """
    if not text:
        return []

    lines = text.split("\n")
    header = [name.strip() for name in _strip_cr(lines[0]).split(",")]

    records: list[RawRecord] = []
    for line in lines[1:]:
        values = _strip_cr(line).split(",")
        records.append(
            {name: value for name, value in zip(header, values)}
        )

    logger.debug(f"Decoded {len(records)} rows against {len(header)} columns.")
    return records


def _strip_cr(line: str) -> str:
    # CRLF exports
    return line[:-1] if line.endswith("\r") else line
