from typing import Any, List, Type, TypeVar
from urllib.parse import quote

from pydantic import BaseModel, ValidationError

from ..errors import UnreadableResponseError
from ..logging_config import get_logger
from .transport import BankTransport

logger = get_logger("homebank.clients")

ModelT = TypeVar("ModelT", bound=BaseModel)


def segment(value: Any) -> str:
    """Quote one path segment (ids, emails)."""
    return quote(str(value), safe="@")


class ResourceClient:
    """
    Base class for the per-resource accessors.
    """

    def __init__(self, transport: BankTransport):
        self.transport = transport

    def _parse(self, model: Type[ModelT], data: Any) -> ModelT:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.error("Unexpected %s payload from backend: %s", model.__name__, e)
            raise UnreadableResponseError() from e

    def _parse_list(self, model: Type[ModelT], data: Any) -> List[ModelT]:
        if data is None:
            return []
        if not isinstance(data, list):
            logger.error("Expected a list of %s, got %s", model.__name__, type(data).__name__)
            raise UnreadableResponseError()
        return [self._parse(model, item) for item in data]
