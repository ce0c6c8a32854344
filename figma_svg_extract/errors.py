from typing import Iterable, Optional


class FigmaSvgExtractError(Exception):
    """Base class for every error that aborts an extraction run"""


class ConfigError(FigmaSvgExtractError):
    """Invalid or missing run configuration"""


class RemoteFetchError(FigmaSvgExtractError):
    """Non-success HTTP status (or transport failure) from a remote call"""

    def __init__(self, message: str, status_code: Optional[int] = None, reason: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason


class RemoteApiError(FigmaSvgExtractError):
    """Application-level error reported inside a successful response"""


class MissingImageUrlError(RemoteApiError):
    """The images endpoint did not return a URL for every requested component"""

    def __init__(self, missing_ids: Iterable[str]):
        self.missing_ids = list(missing_ids)
        super().__init__(f"No SVG URL returned for: {', '.join(self.missing_ids)}")


class PageNotFoundError(FigmaSvgExtractError):
    def __init__(self, page_id: str):
        self.page_id = page_id
        super().__init__(f"Cannot find page: {page_id}")


class DuplicateNameError(FigmaSvgExtractError):
    """Two components resolve to the same output path"""

    def __init__(self, path: str, ids: Iterable[str]):
        self.path = path
        self.ids = list(ids)
        super().__init__(f"Components {', '.join(self.ids)} both export as '{path}'")


class WriteError(FigmaSvgExtractError):
    def __init__(self, path, cause: Optional[BaseException] = None):
        self.path = path
        message = f"Failed to write {path}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
