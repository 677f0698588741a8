class CourseError(Exception):
    """Base for all course editing errors."""


class NotFoundError(CourseError):
    """Tee or hole not found."""


class DuplicateError(CourseError):
    """Tee name already in use."""


class InvalidFieldError(CourseError):
    """Action names a field that it cannot set."""


class InvalidFeatureError(CourseError):
    """Unknown hole feature type, or a path without its sampled coordinates."""


class UnknownActionError(CourseError):
    """Reducer received an action kind it does not handle."""

    def __init__(self, action_type):
        self.action_type = action_type
        super().__init__(f"Unknown action: {action_type}")
