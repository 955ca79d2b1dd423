"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Request validation
  2xxx: Upstream (Warframe.Market)
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: Validation ---

class MissingItemIdError(AppError):
    def __init__(self) -> None:
        super().__init__(1001, "'url_name' (string) is required", 400)


class NoFlipTargetsError(AppError):
    def __init__(self) -> None:
        super().__init__(1002, "Provide either 'url_names' or 'query'", 400)


class MissingQueryError(AppError):
    def __init__(self) -> None:
        super().__init__(1003, "'query' (string) is required", 400)


# --- 2xxx: Upstream ---

class UpstreamStatusError(AppError):
    """Upstream answered with a non-2xx status."""

    def __init__(
        self,
        method: str,
        url: str,
        status: int,
        reason: str = "",
        body: str = "",
    ) -> None:
        self.method = method
        self.url = url
        self.status = status
        detail = f"WFM {method} {url} -> {status} {reason}".rstrip()
        if body:
            detail = f"{detail} - {body}"
        super().__init__(2001, detail, 502)


class UpstreamTransportError(AppError):
    """Request never produced a response (timeout, DNS, connection reset)."""

    def __init__(self, method: str, url: str, detail: str) -> None:
        self.method = method
        self.url = url
        super().__init__(2002, f"WFM {method} {url} failed: {detail}", 502)


class UpstreamPayloadError(AppError):
    def __init__(self, method: str, url: str) -> None:
        self.method = method
        self.url = url
        super().__init__(2003, f"WFM {method} {url} returned a non-JSON body", 502)
