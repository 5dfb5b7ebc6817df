"""Mapping of transport errors onto file-specific errors."""

from ..exceptions import (
    AuthorizationError,
    MediaForbiddenError,
    MediaNotFoundError,
    NotFoundError,
    StrapiError,
)
from ..protocols import ErrorMapper


class FileErrorMapper:
    """Builds error mappers that annotate HTTP errors with a file ID."""

    @staticmethod
    def create_mapper(file_id: int | None = None) -> ErrorMapper:
        """Create a mapper for operations on ``file_id`` (or on all files).

        - 404 becomes :class:`MediaNotFoundError` when a file ID is known
        - 403 becomes :class:`MediaForbiddenError`
        - anything else is left to the transport's default error
        """

        def mapper(error: StrapiError) -> StrapiError | None:
            if isinstance(error, NotFoundError):
                return MediaNotFoundError(file_id, error) if file_id is not None else None

            if isinstance(error, AuthorizationError):
                return MediaForbiddenError(error, file_id)

            return None

        return mapper
