"""Access to the media library through the upload plugin API.

The upload plugin does not use the content API envelope: lists come back
as a flat array of file objects and single files as the bare object.
"""

import logging
from typing import Any

from ..exceptions import FormatError
from ..http.client import parse_json
from ..models.media import MediaFile
from ..protocols import Transport
from ..utils.url import QueryParams, append_query_params
from .errors import FileErrorMapper
from .validators import validate_file_id, validate_file_query_params

logger = logging.getLogger(__name__)

FILE_API_PREFIX = "/upload/files"


def _to_media_file(data: Any) -> MediaFile:
    if not isinstance(data, dict):
        raise FormatError(f"Expected a file object, got {type(data).__name__}")
    return MediaFile.model_validate(data)


class FilesManager:
    """List, fetch and delete files of the media library.

    Example:
        ```python
        images = await client.files.find({
            "filters": {"mime": {"$contains": "image"}},
            "sort": ["name:asc"],
        })
        file = await client.files.find_one(images[0].id)
        ```
    """

    def __init__(self, http_client: Transport) -> None:
        self._http_client = http_client

        logger.debug("Initialized files manager")

    async def find(self, query_params: QueryParams | None = None) -> list[MediaFile]:
        """List files, optionally filtered and sorted.

        Args:
            query_params: ``filters`` (mapping) and ``sort`` (string or list of strings)

        Returns:
            Files in server order

        Raises:
            ValidationError: If the query parameters are malformed (no request is sent)
            MediaForbiddenError: If listing files is not permitted
        """
        validate_file_query_params(query_params)

        logger.debug("Finding files")

        url = append_query_params(FILE_API_PREFIX, query_params)
        client = self._http_client.create(FileErrorMapper.create_mapper())
        response = await client.get(url)
        body = parse_json(response)

        if not isinstance(body, list):
            raise FormatError(f"Expected a list of files, got {type(body).__name__}")

        logger.debug(f"Found {len(body)} files")
        return [_to_media_file(item) for item in body]

    async def find_one(self, file_id: int) -> MediaFile:
        """Retrieve a file by its numeric ID.

        Raises:
            ValidationError: If ``file_id`` is not a positive integer
            MediaNotFoundError: If the file does not exist
            MediaForbiddenError: If access to the file is not permitted
        """
        validate_file_id(file_id)

        logger.debug(f"Finding file with ID {file_id}")

        client = self._http_client.create(FileErrorMapper.create_mapper(file_id))
        response = await client.get(f"{FILE_API_PREFIX}/{file_id}")

        logger.debug(f"Found file with ID {file_id}")
        return _to_media_file(parse_json(response))

    async def delete(self, file_id: int) -> MediaFile:
        """Delete a file by its numeric ID.

        Returns:
            The deleted file as returned by the server

        Raises:
            ValidationError: If ``file_id`` is not a positive integer
            MediaNotFoundError: If the file does not exist
            MediaForbiddenError: If deleting the file is not permitted
        """
        validate_file_id(file_id)

        logger.debug(f"Deleting file with ID {file_id}")

        client = self._http_client.create(FileErrorMapper.create_mapper(file_id))
        response = await client.delete(f"{FILE_API_PREFIX}/{file_id}")

        logger.info(f"Deleted file with ID {file_id}")
        return _to_media_file(parse_json(response))
