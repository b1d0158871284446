"""Pipeline exceptions and the classifier that maps any failure to an ErrorKind.

Only validation failures reach the caller. Every other kind is recoverable:
the orchestrator logs the classified message and serves fallback suggestions.
"""

from __future__ import annotations

from dataclasses import dataclass

import httpx

from trymate.models.contracts import ErrorKind

TRANSPORT_MESSAGE = "Cannot reach backend. Ensure the generate endpoint is deployed and reachable."
EXTRACTION_MESSAGE = "Model response contained no usable suggestions."


class PipelineError(Exception):
    kind: ErrorKind = ErrorKind.EXTRACTION


class ValidationError(PipelineError):
    """Missing image or category, or an image that fails the type/size check."""

    kind = ErrorKind.VALIDATION


class TransportError(PipelineError):
    """DNS, connection or timeout failure before any HTTP status was received."""

    kind = ErrorKind.TRANSPORT


class RemoteError(PipelineError):
    """The endpoint answered with a status outside 200-299."""

    kind = ErrorKind.REMOTE

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Server {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class ExtractionError(PipelineError):
    """The response held no text that could be split into suggestions."""

    kind = ErrorKind.EXTRACTION


@dataclass(frozen=True)
class ClassifiedError:
    kind: ErrorKind
    message: str

    @property
    def recoverable(self) -> bool:
        return self.kind is not ErrorKind.VALIDATION


def classify(exc: BaseException) -> ClassifiedError:
    """Map an exception raised anywhere in the pipeline to a kind and message."""
    if isinstance(exc, ValidationError):
        return ClassifiedError(ErrorKind.VALIDATION, str(exc))
    if isinstance(exc, RemoteError):
        return ClassifiedError(ErrorKind.REMOTE, str(exc))
    if isinstance(exc, (TransportError, httpx.TransportError)):
        return ClassifiedError(ErrorKind.TRANSPORT, TRANSPORT_MESSAGE)
    if isinstance(exc, httpx.HTTPStatusError):
        return ClassifiedError(
            ErrorKind.REMOTE,
            f"Server {exc.response.status_code}: {exc.response.text}",
        )
    return ClassifiedError(ErrorKind.EXTRACTION, EXTRACTION_MESSAGE)
