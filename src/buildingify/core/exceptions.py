"""Custom exceptions for buildingify."""


class BuildingifyError(Exception):
    """Base exception for buildingify."""

    pass


class InvalidPointError(BuildingifyError):
    """Raised when a value cannot be read as the coordinates of a point."""

    pass


class InvalidSequenceError(BuildingifyError):
    """Raised when a coordinate sequence holds something other than coordinate pairs."""

    pass


class GeometryError(BuildingifyError):
    """Raised when geometry operations fail."""

    pass


class ValidationError(BuildingifyError):
    """Raised when input validation fails."""

    pass
