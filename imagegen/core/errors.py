# imagegen/core/errors.py
"""Failures surfaced by the proxies, each rendered as ``{"error": message}``."""


class ImageGeneratorError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidRequest(ImageGeneratorError):
    """Missing or malformed client input."""

    status_code = 400


class ConfigurationError(ImageGeneratorError):
    """Deployment is missing the provider credential."""

    status_code = 500


class AuthError(ImageGeneratorError):
    status_code = 401


class RateLimited(ImageGeneratorError):
    status_code = 429


class GenerationFailed(ImageGeneratorError):
    status_code = 500


class FetchFailed(ImageGeneratorError):
    status_code = 500
