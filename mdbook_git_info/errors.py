class GitInfoError(RuntimeError):
    """Base class for every error raised by the preprocessor."""


class GitHistoryError(GitInfoError):
    """The history of a single file could not be extracted."""


class ToolUnavailable(GitHistoryError):
    def __init__(self, executable: str, reason: str):
        self.executable = executable
        super().__init__(
            f"Failed to launch `{executable} log` ({reason}). Is git installed and available in $PATH?"
        )


class QueryFailed(GitHistoryError):
    def __init__(self, exit_code: int, stdout: str, stderr: str):
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(f"Git log failed. Exit code: {exit_code}.\nSTDOUT: {stdout}\nSTDERR: {stderr}")


class MalformedOutput(GitHistoryError):
    def __init__(self, message: str, line: str | None = None):
        self.line = line
        if line is not None:
            message = f"{message}: {line!r}"
        super().__init__(message)


class UnsupportedRenderer(GitInfoError):
    def __init__(self, renderer: str):
        self.renderer = renderer
        super().__init__(f"Unsupported renderer {renderer}")


class ChapterError(GitInfoError):
    """Wraps an extraction failure with the identity of the chapter being processed."""

    def __init__(self, chapter_name: str, cause: Exception):
        self.chapter_name = chapter_name
        self.cause = cause
        super().__init__(f"Chapter name: {chapter_name}: Cannot extract git history: {cause}")


class ProtocolError(GitInfoError):
    """The request read from mdBook is not a valid [context, book] pair."""
