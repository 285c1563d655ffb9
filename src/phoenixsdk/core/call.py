r"""Description of a single endpoint call."""

from __future__ import annotations

__all__ = ["HTTP_METHODS", "EndpointCall"]

from dataclasses import dataclass
from typing import Any

HTTP_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")


@dataclass(frozen=True)
class EndpointCall:
    """An immutable description of one HTTP exchange.

    Args:
        method: The HTTP method. It is upper-cased and must be one of
            ``GET``, ``POST``, ``PUT``, ``PATCH`` or ``DELETE``.
        path: The path relative to the API root (e.g. ``/jobs``).
        data: Optional payload. A ``dict`` or ``list`` is sent as JSON,
            ``bytes`` or ``str`` are sent as raw content.
        params: Optional query parameters.
        files: Optional multipart files, in the ``httpx`` format.

    Example:
        ```pycon
        >>> from phoenixsdk.core.call import EndpointCall
        >>> call = EndpointCall("get", "/jobs")
        >>> call.method
        'GET'
        >>> call.to_request_kwargs()
        {}

        ```
    """

    method: str
    path: str
    data: Any = None
    params: dict[str, Any] | None = None
    files: dict[str, Any] | None = None

    def __post_init__(self) -> None:
        method = self.method.upper()
        if method not in HTTP_METHODS:
            msg = f"Unsupported HTTP method: {self.method!r} (expected one of {HTTP_METHODS})"
            raise ValueError(msg)
        # frozen dataclass
        object.__setattr__(self, "method", method)

    @property
    def is_multipart(self) -> bool:
        return self.files is not None

    def to_request_kwargs(self) -> dict[str, Any]:
        """Return the keyword arguments to pass to ``httpx``."""
        kwargs: dict[str, Any] = {}
        if self.params:
            kwargs["params"] = {k: v for k, v in self.params.items() if v is not None}
        if self.files is not None:
            kwargs["files"] = self.files
            if self.data is not None:
                kwargs["data"] = self.data
        elif isinstance(self.data, (bytes, bytearray, str)):
            kwargs["content"] = self.data
        elif self.data is not None:
            kwargs["json"] = self.data
        return kwargs
