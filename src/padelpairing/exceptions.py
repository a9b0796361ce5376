"""Exceptions for use in Padel Pairing"""

# Padel Pairing
# Copyright (C) 2025  Padel Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.


# ========== Base Application Exception ==========


class PadelPairingException(Exception):
    """Base exception for all Padel Pairing errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Pairing Exceptions ==========


class PairingException(PadelPairingException):
    """Base exception for pairing-related errors."""

    pass


class InvalidPairingException(PairingException):
    """Raised when a generated match breaks the team structure rules."""

    pass


class NoPairingAvailableException(PairingException):
    """Raised when no valid pairing can be generated."""

    pass


class UnsupportedFormatException(PairingException):
    """Raised when a tournament format name is not one of the known formats."""

    pass


# ========== Tournament Exceptions ==========


class TournamentException(PadelPairingException):
    """Base exception for tournament-related errors."""

    pass


class TournamentStateException(TournamentException):
    """Raised when tournament is in an invalid state for the requested operation."""

    pass


class MatchNotFoundException(TournamentException):
    """Raised when a requested match does not exist in the current round."""

    pass


# ========== Player Exceptions ==========


class PlayerException(PadelPairingException):
    """Base exception for player-related errors."""

    pass


class InvalidPlayerDataException(PlayerException):
    """Raised when player data is invalid or incomplete."""

    pass


# ========== Result Exceptions ==========


class ResultException(PadelPairingException):
    """Base exception for result recording errors."""

    pass


class InvalidResultException(ResultException):
    """Raised when a result edit is invalid (e.g., unknown team key)."""

    pass


class InvalidScoreException(InvalidResultException):
    """Raised when a submitted score is not an integer within range."""

    pass


class DuplicateResultException(ResultException):
    """Raised when attempting to award points for a match twice."""

    pass


class RoundValidationException(ResultException):
    """Raised when a round cannot be completed because scores are missing.

    Attributes
    ----------
    invalid_match_ids : list of str
        Matches whose scores do not add up to the match point target.
    """

    def __init__(self, message: str, invalid_match_ids=None):
        super().__init__(message)
        self.invalid_match_ids = list(invalid_match_ids or [])


# ========== Validation Exceptions ==========


class ValidationException(PadelPairingException):
    """Base exception for validation errors."""

    pass


class PlayerCountValidationException(ValidationException):
    """Raised when a player count is not supported."""

    pass


class MatchPointsValidationException(ValidationException):
    """Raised when a match point target is invalid."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(PadelPairingException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
