# taskboard/utils/errors.py
# Typed errors raised by services; main.py turns them into {"message": ...}

from fastapi import status


class AppError(Exception):
    """Base error carrying an HTTP status and a client facing message"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class UnauthorizedError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST


VALUE_ERROR_PREFIX = "Value error, "


def format_validation_errors(errors) -> str:
    """Flatten pydantic error dicts into one comma separated message"""
    messages = []
    for error in errors:
        ctx = error.get("ctx") or {}
        if isinstance(ctx.get("error"), Exception):
            messages.append(str(ctx["error"]))
            continue
        msg = error.get("msg", "Invalid input")
        if msg.startswith(VALUE_ERROR_PREFIX):
            messages.append(msg[len(VALUE_ERROR_PREFIX):])
            continue
        field = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{field}: {msg}" if field else msg)
    return ", ".join(messages) or "Invalid input"
