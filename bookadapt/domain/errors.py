"""Domain errors for book adaptation runs."""


class AdaptationError(Exception):
    """
    Base class for failures that stop an adaptation run.

    Attributes:
        chunk_index: 0-based index of the chunk being processed when the
            failure happened (None when raised outside the chunk loop)
    """

    chunk_index: int | None = None


class SourceNotFound(AdaptationError):
    """
    Raised when the input text file cannot be read.

    Attributes:
        path: Input path that failed to resolve
        reason: Underlying reason (optional)
    """

    def __init__(self, path: str, reason: str | None = None) -> None:
        self.path = path
        self.reason = reason
        msg = f"Input file not found: {path}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class BackendUnavailable(AdaptationError):
    """
    Raised when the generation backend cannot be reached at all.

    Covers connection refused, timeouts and name resolution failures.

    Attributes:
        base_url: Backend base URL
        reason: Transport-level error description
    """

    def __init__(self, base_url: str, reason: str) -> None:
        self.base_url = base_url
        self.reason = reason
        super().__init__(
            f"Generation backend unreachable at {base_url}: {reason}. "
            f"Make sure Ollama is running: ollama serve"
        )


class BackendError(AdaptationError):
    """
    Raised when the generation backend answers with an error.

    Attributes:
        status_code: HTTP status code (None when the body could not be decoded)
        detail: Error detail from the backend
    """

    def __init__(self, status_code: int | None, detail: str) -> None:
        self.status_code = status_code
        self.detail = detail
        if status_code is not None:
            super().__init__(f"Generation backend request failed: {status_code} {detail}")
        else:
            super().__init__(f"Generation backend request failed: {detail}")


class PersistenceError(AdaptationError):
    """
    Raised when a checkpoint or the final document cannot be written.

    Attributes:
        path: Target path of the failed write
        reason: Underlying OS error description
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write {path}: {reason}")


class CorruptCheckpoint(AdaptationError):
    """
    Raised when a checkpoint file exists but cannot be parsed.

    Never escapes the checkpoint store: it is logged and the run starts fresh.

    Attributes:
        path: Checkpoint file path
        reason: Parse/validation error description
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Checkpoint file {path} is unreadable: {reason}")
