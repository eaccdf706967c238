"""Exception types for extraction and retrieval errors.

This module defines the exception hierarchy for cheat sheet assumption
violations. The extractor assumes a fixed document shape; every place where
that assumption can break raises a specific subclass carrying enough context
to locate the offending markup.
"""

from typing import Any


class ExtractionAssumptionException(Exception):
    """Base class for document shape assumption violations.

    The extractor makes assumptions about the structure of the cheat sheet
    page. When these assumptions are violated, it raises clear, contextual
    exceptions so that upstream markup drift is surfaced instead of producing
    incomplete data.
    """

    def __init__(
        self,
        message: str,
        source_url: str = "",
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable description of the assumption violation.
            source_url: The URL the document was fetched from, if known.
            context: Optional dict of additional context (list id, item index).
        """
        self.message = message
        self.source_url = source_url
        self.context = context or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context.

        Returns:
            Formatted error message string.
        """
        parts = [self.message]
        if self.source_url:
            parts.append(f"URL: {self.source_url}")

        if self.context:
            parts.append("Context:")
            for key, value in self.context.items():
                parts.append(f"  {key}: {value}")

        return "\n".join(parts)


class DocumentParseError(ExtractionAssumptionException):
    """Raised when the raw document cannot be parsed into a tree."""


class ContainerNotFound(ExtractionAssumptionException):
    """Raised when the root container element is absent.

    Attributes:
        tag: The expected container tag.
        element_id: The expected container id.
    """

    def __init__(self, tag: str, element_id: str, source_url: str = "") -> None:
        self.tag = tag
        self.element_id = element_id
        super().__init__(
            f'did not find <{tag} id="{element_id}">',
            source_url,
            {"tag": tag, "id": element_id},
        )


class MissingAttribute(ExtractionAssumptionException):
    """Raised when a matched list element lacks its identifying attribute.

    Attributes:
        attribute: Name of the missing attribute.
        element: Short description of the offending element.
    """

    def __init__(
        self,
        attribute: str,
        element: str,
        source_url: str = "",
        context: dict[str, Any] | None = None,
    ) -> None:
        self.attribute = attribute
        self.element = element
        super().__init__(
            f"found {element} without {attribute} attribute",
            source_url,
            {"element": element, "attribute": attribute} | (context or {}),
        )


class MissingCategory(ExtractionAssumptionException):
    """Raised when no heading precedes a list, or the heading has no text."""

    def __init__(
        self,
        heading_tag: str,
        list_id: str,
        reason: str = "",
        source_url: str = "",
    ) -> None:
        self.heading_tag = heading_tag
        self.list_id = list_id
        message = reason or f"did not find {heading_tag} before list"
        super().__init__(
            message,
            source_url,
            {"list_id": list_id, "heading_tag": heading_tag},
        )


class ItemStructureException(ExtractionAssumptionException):
    """Base class for failures inside a single list item.

    Attributes:
        list_id: The id of the list containing the item.
        item_index: Zero-based index of the item among the list's items.
    """

    def __init__(
        self,
        message: str,
        list_id: str,
        item_index: int,
        source_url: str = "",
        context: dict[str, Any] | None = None,
    ) -> None:
        self.list_id = list_id
        self.item_index = item_index
        super().__init__(
            message,
            source_url,
            {"list_id": list_id, "item_index": item_index} | (context or {}),
        )


class MissingContainer(ItemStructureException):
    """Raised when a list item has no element child to act as its wrapper."""

    def __init__(
        self,
        expected_tag: str,
        list_id: str,
        item_index: int,
        source_url: str = "",
    ) -> None:
        self.expected_tag = expected_tag
        super().__init__(
            f"expected {expected_tag} element",
            list_id,
            item_index,
            source_url,
            {"expected_tag": expected_tag},
        )


class UnexpectedTag(ItemStructureException):
    """Raised when a list item's wrapper has the wrong tag."""

    def __init__(
        self,
        expected_tag: str,
        actual_tag: str,
        list_id: str,
        item_index: int,
        source_url: str = "",
    ) -> None:
        self.expected_tag = expected_tag
        self.actual_tag = actual_tag
        super().__init__(
            f"expected emoji to contain a <{expected_tag}> element, "
            f"found <{actual_tag}>",
            list_id,
            item_index,
            source_url,
            {"expected_tag": expected_tag, "actual_tag": actual_tag},
        )


class MissingPayload(ItemStructureException):
    """Raised when a wrapper holds no payload element."""

    def __init__(
        self,
        payload_tag: str,
        payload_class: str,
        list_id: str,
        item_index: int,
        source_url: str = "",
    ) -> None:
        self.payload_tag = payload_tag
        self.payload_class = payload_class
        super().__init__(
            f'did not find <{payload_tag} class="{payload_class}">',
            list_id,
            item_index,
            source_url,
            {"payload_tag": payload_tag, "payload_class": payload_class},
        )


# =============================================================================
# Transient Exceptions
# =============================================================================


class TransientException(Exception):
    """Base class for retrieval errors that might resolve on retry.

    Transient exceptions represent temporary failures like network issues,
    unexpected status codes, or timeouts. Unlike assumption exceptions which
    indicate the document shape has changed, transient exceptions suggest
    re-running the pipeline may succeed.
    """

    pass


class HTMLResponseAssumptionException(TransientException):
    """Raised when HTTP response has unexpected status code.

    Attributes:
        status_code: The actual HTTP status code received.
        expected_codes: List of status codes that were expected.
        url: The URL that returned the unexpected status.
        message: Human-readable error message.
    """

    def __init__(
        self,
        status_code: int,
        expected_codes: list[int],
        url: str,
    ) -> None:
        self.status_code = status_code
        self.expected_codes = expected_codes
        self.url = url

        expected_str = ", ".join(str(code) for code in expected_codes)
        self.message = (
            f"HTTP {status_code} from {url} (expected one of: {expected_str})"
        )
        super().__init__(self.message)


class RequestTimeoutException(TransientException):
    """Raised when a request times out.

    Attributes:
        url: The URL that timed out.
        timeout_seconds: The timeout duration in seconds.
        message: Human-readable error message.
    """

    def __init__(self, url: str, timeout_seconds: float | None) -> None:
        self.url = url
        self.timeout_seconds = timeout_seconds
        self.message = f"Request to {url} timed out after {timeout_seconds}s"
        super().__init__(self.message)


class RequestFailedException(TransientException):
    """Raised when the transport fails before a response arrives."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        self.message = f"Failed to download {url}: {reason}"
        super().__init__(self.message)
