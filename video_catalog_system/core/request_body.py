"""
JSON request body decoding.

Bodies are decoded as JSON whatever Content-Type the client sent; anything
that does not decode into the expected model is MalformedInputError.
"""

from typing import Callable, Awaitable, Type, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from .exceptions import MalformedInputError

ModelT = TypeVar("ModelT", bound=BaseModel)


def json_body(model: Type[ModelT]) -> Callable[[Request], Awaitable[ModelT]]:
    """Build a FastAPI dependency that parses the raw body into ``model``"""

    async def parse_body(request: Request) -> ModelT:
        raw = await request.body()
        try:
            return model.model_validate_json(raw.decode("utf-8"))
        except (UnicodeDecodeError, ValidationError) as e:
            raise MalformedInputError(f"Malformed {model.__name__} body") from e

    return parse_body
