# server/core/errors.py


class ChoreTrackerError(Exception):
    """
    Base class for request-local failures.
    Each subclass knows the HTTP status it maps to at the API boundary.
    """
    status_code = 500
    default_message = "Internal error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingField(ChoreTrackerError):
    status_code = 400
    default_message = "Missing required field"


class DuplicateUser(ChoreTrackerError):
    status_code = 400
    default_message = "Username already taken."


class InvalidCredentials(ChoreTrackerError):
    status_code = 401
    default_message = "Invalid username or password."


class NotFound(ChoreTrackerError):
    status_code = 404
    default_message = "Chore not found"


class NotCompleted(ChoreTrackerError):
    status_code = 400
    default_message = "Only completed chores can be deleted."


class Forbidden(ChoreTrackerError):
    status_code = 403
    default_message = "Access denied. Must be an organizer."


class Unauthenticated(ChoreTrackerError):
    # Answered with a redirect to the login page, not a JSON body.
    status_code = 401
    default_message = "Login required"
