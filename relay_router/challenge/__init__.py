"""Challenge input: reading and parsing the line-oriented challenge format."""

from relay_router.challenge.parser import ChallengeDetails, ChallengeFormatError, parse_challenge
from relay_router.challenge.reader import download_challenge, read_challenge

__all__ = [
    "ChallengeDetails",
    "ChallengeFormatError",
    "parse_challenge",
    "read_challenge",
    "download_challenge",
]
