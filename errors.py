class ExpenseTrackerError(Exception):
    status_code = 500
    message = "Internal error"

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message

    def to_dict(self):
        return {"error": self.message}


class NotFoundError(ExpenseTrackerError):
    status_code = 404
    message = "Not found"


class InvalidInputError(ExpenseTrackerError):
    """Raised by the HTTP layer when a form does not validate."""
    status_code = 400
    message = "Invalid input"

    def __init__(self, errors, message=None):
        super().__init__(message)
        self.errors = errors

    def to_dict(self):
        return {"error": self.message, "errors": self.errors}


class ConflictError(ExpenseTrackerError):
    status_code = 409
    message = "Conflict"
