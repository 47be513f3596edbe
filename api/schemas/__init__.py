# api/schemas/__init__.py
from typing import Any, Optional

from pydantic import BaseModel
from sqlalchemy import inspect

from .author import AuthorResponse
from .book import BookResponse


def dump(model: type[BaseModel], obj: Optional[Any]) -> Optional[dict]:
    """Serialize an ORM object through a response schema, camelCase keys.

    Relations the query did not load are left out, as are unset optional
    fields.
    """
    if obj is None:
        return None
    state = inspect(obj, raiseerr=False)
    if state is not None:
        obj = {name: getattr(obj, name) for name in model.model_fields if name not in state.unloaded}
    return model.model_validate(obj, from_attributes=True).model_dump(mode="json", by_alias=True, exclude_none=True)


__all__ = ['AuthorResponse', 'BookResponse', 'dump']
