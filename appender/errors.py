class AppendError(Exception):
    """Base class for failures while appending to a target file."""

    status_code = 500
    message = "Error appending to file"

    def __init__(self, file_name: str, reason: str = ""):
        self.file_name = file_name
        self.reason = reason
        super().__init__(f"{self.message}: {file_name}" + (f" ({reason})" if reason else ""))


class FileOpenError(AppendError):
    message = "Error opening file"


class FileWriteError(AppendError):
    message = "Error writing to file"


class PathTraversalError(AppendError):
    status_code = 400
    message = "Invalid file name"


class RenderError(Exception):
    message = "Unable to load template"
