"""Challenge parser - Turns challenge text into source, target and relays.

Text format (one record per line):
    # SEED: 0.123              comment, any line containing '#'
    SAT0,-12.3,45.6,512.7      relay: name, latitude, longitude, altitude (km)
    ROUTE,60.1,24.9,-33.8,151.2  source latitude/longitude, target latitude/longitude

Fields are separated by a comma and optional whitespace. Blank lines are
skipped. Source and target are placed at ground level.
"""

import logging
from dataclasses import dataclass, field

from relay_router.constants import ChallengeConfig
from relay_router.model.location import Location

logger = logging.getLogger(__name__)


class ChallengeFormatError(ValueError):
    """Raised when challenge text cannot be parsed.

    Attributes:
        line_number: 1-based line of the offending record, None for whole-input errors
    """

    def __init__(self, message: str, line_number: int | None = None) -> None:
        self.line_number = line_number
        prefix = f"line {line_number}: " if line_number is not None else ""
        super().__init__(f"{prefix}{message}")


@dataclass(frozen=True)
class ChallengeDetails:
    """Everything a challenge defines.

    Attributes:
        source: Route start (ground level)
        target: Route end (ground level)
        relays: Relay locations in input order
        comments: Comment lines, verbatim and in input order
    """

    source: Location
    target: Location
    relays: tuple[Location, ...] = field(default_factory=tuple)
    comments: tuple[str, ...] = field(default_factory=tuple)


def _coordinates(fields: list[str], line_number: int) -> list[float]:
    try:
        return [float(value) for value in fields]
    except ValueError:
        raise ChallengeFormatError(f"non-numeric coordinate in {fields}", line_number) from None


def _location(name: str, coordinates: list[float], line_number: int) -> Location:
    try:
        return Location(name, *coordinates)
    except ValueError as e:
        raise ChallengeFormatError(str(e), line_number) from e


def parse_challenge(contents: str) -> ChallengeDetails:
    """Parse challenge text.

    Args:
        contents: Whole challenge text

    Returns:
        ChallengeDetails with exactly one source and target.

    Raises:
        ChallengeFormatError: On malformed records, or unless exactly one ROUTE record is present.
    """
    relays: list[Location] = []
    comments: list[str] = []
    endpoints: tuple[Location, Location] | None = None

    for line_number, raw_line in enumerate(contents.splitlines(), start=1):
        line = raw_line.strip()
        if not line:
            continue

        if ChallengeConfig.COMMENT_MARKER in line:
            comments.append(raw_line.rstrip())
            continue

        record_type, *fields = ChallengeConfig.FIELD_SEPARATOR.split(line)

        if record_type == ChallengeConfig.ROUTE_RECORD:
            if len(fields) != ChallengeConfig.ROUTE_FIELDS - 1:
                raise ChallengeFormatError(
                    f"{ChallengeConfig.ROUTE_RECORD} needs {ChallengeConfig.ROUTE_FIELDS - 1} coordinates, got {len(fields)}",
                    line_number,
                )
            if endpoints is not None:
                raise ChallengeFormatError(f"duplicate {ChallengeConfig.ROUTE_RECORD} record", line_number)

            coordinates = _coordinates(fields, line_number)
            endpoints = (
                _location(ChallengeConfig.SOURCE_NAME, coordinates[:2], line_number),
                _location(ChallengeConfig.TARGET_NAME, coordinates[2:], line_number),
            )
        else:
            if len(fields) != ChallengeConfig.RELAY_FIELDS - 1:
                raise ChallengeFormatError(
                    f"relay {record_type!r} needs latitude, longitude and altitude, got {len(fields)} field(s)",
                    line_number,
                )
            relays.append(_location(record_type, _coordinates(fields, line_number), line_number))

    if endpoints is None:
        raise ChallengeFormatError(f"no {ChallengeConfig.ROUTE_RECORD} record found")

    source, target = endpoints
    logger.info(f"Parsed challenge: {len(relays)} relay(s), {len(comments)} comment line(s)")
    return ChallengeDetails(source=source, target=target, relays=tuple(relays), comments=tuple(comments))
