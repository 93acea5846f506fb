class NotifierError(Exception):
    """Base class for errors that end a notification request"""
    status_code = 500

    def __init__(self, message, details=None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self):
        body = {'error': self.message}
        if self.details:
            body['details'] = self.details
        return body


class ValidationError(NotifierError):
    status_code = 400


class ConfigurationError(NotifierError):
    status_code = 500


class NotFoundError(NotifierError):
    status_code = 404


class UpstreamError(NotifierError):
    status_code = 500
