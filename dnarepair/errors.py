"""
Error taxonomy shared by the services and the API.

Every error maps onto an HTTP status code and renders as ``{"message": ..., "error": ...}``.
"""


class DNARepairError(Exception):
    status_code = 500

    def __init__(self, message, error=None, headers=None):
        super().__init__(message)
        self.message = message
        self.error = error
        self.headers = headers

    def to_dict(self):
        body = {"message": self.message}
        if self.error is not None:
            body["error"] = self.error
        return body


class InvalidRequest(DNARepairError):
    status_code = 400


class Unauthorized(DNARepairError):
    status_code = 401


class Forbidden(DNARepairError):
    status_code = 403


class NotFound(DNARepairError):
    status_code = 404


class TooManyRequests(DNARepairError):
    status_code = 429


class ServerError(DNARepairError):
    status_code = 500
