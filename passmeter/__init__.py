"""PassMeter -- password generation and strength scoring.

Core functions for building a character pool, generating random passwords,
scoring their strength and mapping a score to a label and indicator colour.
"""

import logging
import re
import secrets
from typing import NamedTuple

logger = logging.getLogger(__name__)


# ── Character classes ──────────────────────────────────────────────────────

UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
DIGITS = "0123456789"
SYMBOLS = "!@#$%^&*()_+~`|}{[]:;?><,./-="


class InvalidSelectionError(ValueError):
    """Raised when a password is requested with no character class enabled."""


class CharacterClassSelection(NamedTuple):
    """Which character classes a password should be drawn from.

    Field order is the pool order: uppercase, lowercase, digits, symbols.
    """

    uppercase: bool = True
    lowercase: bool = True
    digits: bool = True
    symbols: bool = True

    @property
    def enabled_count(self) -> int:
        return sum(bool(flag) for flag in self)


_CLASS_SETS = {
    "uppercase": UPPERCASE,
    "lowercase": LOWERCASE,
    "digits": DIGITS,
    "symbols": SYMBOLS,
}


def character_pool(selection: CharacterClassSelection) -> str:
    """Concatenate the character sets enabled in *selection*, in class order."""
    return "".join(
        _CLASS_SETS[name]
        for name, enabled in zip(selection._fields, selection)
        if enabled
    )


# ── Password generation ────────────────────────────────────────────────────


def generate_password(
    length: int = 16,
    uppercase: bool = True,
    lowercase: bool = True,
    digits: bool = True,
    symbols: bool = True,
) -> str:
    """Generate a random password of exactly *length* characters.

    Every position is drawn independently and uniformly from the pool of
    enabled classes.  Indices come from :func:`secrets.randbelow`, which
    uses the OS CSPRNG and rejection sampling, so no pool size suffers
    modulo bias.

    Raises :class:`InvalidSelectionError` if no class is enabled.
    """
    if length < 0:
        raise ValueError("Password length must not be negative")

    selection = CharacterClassSelection(uppercase, lowercase, digits, symbols)
    pool = character_pool(selection)
    if not pool:
        raise InvalidSelectionError("Please select at least one character type")

    logger.debug("Generating %d characters from a pool of %d", length, len(pool))
    return "".join(pool[secrets.randbelow(len(pool))] for _ in range(length))


# ── Strength analysis ──────────────────────────────────────────────────────

_CLASS_PATTERNS = {
    "uppercase": re.compile(r"[A-Z]"),
    "lowercase": re.compile(r"[a-z]"),
    "digits":    re.compile(r"[0-9]"),
    "symbols":   re.compile(r"[^A-Za-z0-9]"),
}

MAX_LENGTH_POINTS = 50
POINTS_PER_CLASS = 15
INCONSISTENCY_PENALTY = 20


def detect_classes(password: str) -> dict[str, bool]:
    """Return which character classes actually occur in *password*."""
    return {
        name: bool(pattern.search(password))
        for name, pattern in _CLASS_PATTERNS.items()
    }


def missing_classes(
    password: str, selection: CharacterClassSelection
) -> list[str]:
    """Return the classes enabled in *selection* that *password* lacks."""
    present = detect_classes(password)
    return [
        name
        for name, wanted in zip(selection._fields, selection)
        if wanted and not present[name]
    ]


def calculate_strength(
    password: str,
    uppercase: bool = True,
    lowercase: bool = True,
    digits: bool = True,
    symbols: bool = True,
) -> int:
    """Score *password* from 0 to 100.

    One point per character up to 50, plus 15 per requested class.  If any
    requested class does not occur in the password, 20 points come off.
    """
    if not password:
        return 0

    selection = CharacterClassSelection(uppercase, lowercase, digits, symbols)
    missing = missing_classes(password, selection)

    score = min(len(password), MAX_LENGTH_POINTS)
    score += selection.enabled_count * POINTS_PER_CLASS
    if missing:
        score = max(score - INCONSISTENCY_PENALTY, 0)

    score = min(max(score, 0), 100)
    logger.debug(
        "Scored length %d: %d (requested %d classes, %d missing)",
        len(password), score, selection.enabled_count, len(missing),
    )
    return score


# ── Score presentation ─────────────────────────────────────────────────────

# (exclusive upper bound, label, colour); the last band catches the rest.
_BANDS = [
    (30, "Weak", "#f44336"),
    (60, "Moderate", "#ff9800"),
    (80, "Strong", "#2196F3"),
    (None, "Very Strong", "#4CAF50"),
]

LABELS = [label for _, label, _ in _BANDS]


def _band(score: int) -> tuple[str, str]:
    for upper, label, color in _BANDS[:-1]:
        if score < upper:
            return label, color
    _, label, color = _BANDS[-1]
    return label, color


def strength_description(score: int) -> str:
    """Return the label for *score*: Weak, Moderate, Strong or Very Strong."""
    return _band(score)[0]


def strength_color(score: int) -> str:
    """Return the CSS colour of the strength indicator for *score*."""
    return _band(score)[1]


def describe_strength(score: int) -> dict:
    label, color = _band(score)
    return {"label": label, "color": color}


def strength_report(
    password: str,
    uppercase: bool = True,
    lowercase: bool = True,
    digits: bool = True,
    symbols: bool = True,
) -> dict:
    """Score *password* and return a report for display.

    Returns a dict with keys:
        length            -- int
        score             -- int 0-100
        label             -- str
        color             -- str  (CSS hex colour)
        requested_classes -- dict[str, bool]
        char_classes      -- dict[str, bool]  (classes actually present)
        missing_classes   -- list[str]  (requested but absent)
    """
    selection = CharacterClassSelection(uppercase, lowercase, digits, symbols)
    score = calculate_strength(password, **selection._asdict())

    return {
        "length": len(password),
        "score": score,
        **describe_strength(score),
        "requested_classes": selection._asdict(),
        "char_classes": detect_classes(password),
        "missing_classes": missing_classes(password, selection) if password else [],
    }
