"""Validation utilities for Padel Pairing.

This module provides reusable validation functions with consistent error handling.
"""

from typing import Any, Optional

from padelpairing.constants import (
    SUPPORTED_FORMATS,
    SUPPORTED_PLAYER_COUNTS,
    TEAM_KEYS,
)
from padelpairing.exceptions import (
    InvalidResultException,
    InvalidScoreException,
    MatchPointsValidationException,
    PlayerCountValidationException,
)


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Player Validation ==========


def validate_player_name(name: Optional[str]) -> ValidationResult:
    """Validate a player display name.

    Blank names are valid and sanitize to ``None`` so the caller can fall back
    to a default name.

    Args:
        name: Name to validate

    Returns:
        ValidationResult with validation status
    """
    if name is None or not str(name).strip():
        return ValidationResult(is_valid=True, sanitized_value=None)

    if not isinstance(name, str):
        return ValidationResult(
            is_valid=False,
            error_message=f"Player name must be text: {name!r}",
        )

    return ValidationResult(is_valid=True, sanitized_value=name.strip())


def validate_player_count(count: Any) -> ValidationResult:
    """Validate that a player count is one of the supported sizes.

    Args:
        count: Number of players

    Returns:
        ValidationResult with the count as int when valid
    """
    try:
        count_int = int(count)
    except (ValueError, TypeError):
        return ValidationResult(
            is_valid=False,
            error_message=f"Player count must be a number: {count!r}",
        )

    if count_int not in SUPPORTED_PLAYER_COUNTS:
        supported = " or ".join(str(c) for c in SUPPORTED_PLAYER_COUNTS)
        return ValidationResult(
            is_valid=False,
            error_message=f"Player count must be {supported}: {count_int}",
        )

    return ValidationResult(is_valid=True, sanitized_value=count_int)


def validate_player_count_strict(count: Any) -> int:
    """Validate a player count and return it or raise exception.

    Raises:
        PlayerCountValidationException: If the count is not supported
    """
    result = validate_player_count(count)
    if not result.is_valid:
        raise PlayerCountValidationException(result.error_message)
    return result.sanitized_value


# ========== Match Point Validation ==========


def validate_positive_integer(
    value: Any, field_name: str = "Value"
) -> ValidationResult:
    """Validate that a value is a positive integer.

    Args:
        value: Value to validate
        field_name: Name of the field for error messages

    Returns:
        ValidationResult with validation status
    """
    if value is None:
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} is required",
        )

    if isinstance(value, bool) or (
        isinstance(value, float) and not value.is_integer()
    ):
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} must be a whole number: {value!r}",
        )

    try:
        int_value = int(value)
        if int_value <= 0:
            return ValidationResult(
                is_valid=False,
                error_message=f"{field_name} must be positive",
            )
        return ValidationResult(is_valid=True, sanitized_value=int_value)
    except (ValueError, TypeError, OverflowError):
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} must be a number",
        )


def validate_match_points_strict(match_points: Any) -> int:
    """Validate the points played per match.

    Raises:
        MatchPointsValidationException: If the target is not a positive integer
    """
    result = validate_positive_integer(match_points, "Match points")
    if not result.is_valid:
        raise MatchPointsValidationException(result.error_message)
    return result.sanitized_value


# ========== Score Validation ==========


def validate_score(score: Any, match_points: int) -> ValidationResult:
    """Validate a single team's score for one match.

    The score is interpreted as an integer and must lie in ``[0, match_points]``.

    Args:
        score: Score to validate
        match_points: Total points played in a match

    Returns:
        ValidationResult with the score as int when valid
    """
    if isinstance(score, bool):
        return ValidationResult(
            is_valid=False,
            error_message=f"Score must be a number: {score!r}",
        )

    try:
        int_score = int(score)
    except (ValueError, TypeError, OverflowError):
        return ValidationResult(
            is_valid=False,
            error_message=f"Score must be a number: {score!r}",
        )

    if int_score < 0:
        return ValidationResult(
            is_valid=False,
            error_message=f"Score cannot be negative: {int_score}",
        )

    if int_score > match_points:
        return ValidationResult(
            is_valid=False,
            error_message=f"Score cannot exceed {match_points} points: {int_score}",
        )

    return ValidationResult(is_valid=True, sanitized_value=int_score)


def validate_score_strict(score: Any, match_points: int) -> int:
    """Validate a score and return it as int or raise exception.

    Raises:
        InvalidScoreException: If the score is invalid
    """
    result = validate_score(score, match_points)
    if not result.is_valid:
        raise InvalidScoreException(result.error_message)
    return result.sanitized_value


def validate_team_key(team: Any) -> ValidationResult:
    """Validate a team key ('team1' or 'team2')."""
    if team not in TEAM_KEYS:
        return ValidationResult(
            is_valid=False,
            error_message=f"Team must be one of {', '.join(TEAM_KEYS)}: {team!r}",
        )
    return ValidationResult(is_valid=True, sanitized_value=team)


def validate_team_key_strict(team: Any) -> str:
    """Validate a team key or raise exception.

    Raises:
        InvalidResultException: If the key is not a known team
    """
    result = validate_team_key(team)
    if not result.is_valid:
        raise InvalidResultException(result.error_message)
    return result.sanitized_value


# ========== Format Validation ==========


def validate_format_name(name: Any) -> ValidationResult:
    """Validate a tournament format name (case-insensitive)."""
    if not name or not str(name).strip():
        return ValidationResult(
            is_valid=False,
            error_message="Tournament format is required",
        )

    normalized = str(name).strip().lower()
    if normalized not in SUPPORTED_FORMATS:
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"Unknown tournament format {name!r}; "
                f"expected one of {', '.join(SUPPORTED_FORMATS)}"
            ),
        )
    return ValidationResult(is_valid=True, sanitized_value=normalized)
