"""Natural (alphanumeric-aware) ordering for playlist names.

``file2`` sorts before ``file10``: every numeric run is rewritten so that
plain string comparison orders it by value.
"""

import re

_NUMBER_RUN = re.compile(r"\.?[0-9]+")
_RUN_PARTS = re.compile(r"(\.?)0*(.+)")


def _pad_number(match: re.Match[str]) -> str:
    run = match.group(0)
    dec, digits = _RUN_PARTS.match(run).groups()
    if dec:
        # Fractional run, e.g. ".5" -> "0.500000000000"
        return f"{float(run):.12f}"
    # Length prefix makes longer numbers sort after shorter ones
    return f"{len(digits):03d}{digits}"


def normalize_name(name: str) -> str:
    """Lowercase ``name`` and rewrite its numeric runs for comparison."""
    return _NUMBER_RUN.sub(_pad_number, name.lower())


def natural_sort_key(name: str) -> tuple[str, int, str]:
    """Sort key for natural ordering.

    Equal normalized names fall back to length, longer first (``file01``
    before ``file1``), then to the raw string.

    Example:
        >>> sorted(["file10", "file2", "file1"], key=natural_sort_key)
        ['file1', 'file2', 'file10']
    """
    return (normalize_name(name), -len(name), name)
