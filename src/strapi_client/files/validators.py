"""Local validation of file API parameters.

These checks run before any request is sent.
"""

from collections.abc import Mapping
from typing import Any

from ..exceptions import ValidationError
from ..utils.url import UNSET


def validate_file_query_params(query_params: Mapping[str, Any] | None) -> None:
    """Check the shape of ``filters`` and ``sort``.

    ``filters=None`` is accepted and sent as ``filters=null``.

    Raises:
        ValidationError: If ``filters`` is not a mapping, or ``sort`` is neither
            a string nor a list of strings
    """
    if not query_params:
        return

    filters = query_params.get("filters", UNSET)
    if filters is not UNSET and filters is not None and not isinstance(filters, Mapping):
        raise ValidationError("Invalid filters parameter: must be an object")

    sort = query_params.get("sort", UNSET)
    if sort is UNSET or isinstance(sort, str):
        return

    if not isinstance(sort, (list, tuple)):
        raise ValidationError("Invalid sort parameter: must be a string or array of strings")

    for item in sort:
        if not isinstance(item, str):
            raise ValidationError("Invalid sort parameter: array items must be strings")


def validate_file_id(file_id: Any) -> None:
    """Check that ``file_id`` is a positive integer.

    Raises:
        ValidationError: For non-integers (booleans included), zero and negatives
    """
    if isinstance(file_id, bool) or not isinstance(file_id, int) or file_id <= 0:
        raise ValidationError(
            f"Invalid file ID: {file_id!r}. File ID must be a positive number."
        )
