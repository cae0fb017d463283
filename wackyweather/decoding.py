# ABOUTME: Shape-aware JSON decoding for upstream API responses.
# ABOUTME: Checks whether the payload root is an array or an object before validating it into a model.

import json
from enum import Enum
from typing import TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from wackyweather.errors import EmptyResponseError, ParseError, ShapeMismatchError

M = TypeVar("M", bound=BaseModel)


class Shape(Enum):
    """Root kind a caller expects the JSON payload to have."""

    OBJECT = "object"
    LIST = "array"


def root_shape(value) -> Shape:
    """Classify an already-parsed JSON value; scalars count as objects."""
    return Shape.LIST if isinstance(value, list) else Shape.OBJECT


def decode(raw: bytes, model: type[M], shape: Shape) -> M | list[M]:
    """Decode raw JSON into model (Shape.OBJECT) or list[model] (Shape.LIST).

    Raises EmptyResponseError for a blank body, ParseError for malformed JSON or a
    record that fails validation, and ShapeMismatchError when the root kind differs
    from shape.
    """
    if not raw or not raw.strip():
        raise EmptyResponseError("no valid response found")

    try:
        value = json.loads(raw)
    except ValueError as e:
        raise ParseError(f"malformed JSON response: {e}") from e

    actual = root_shape(value)
    if actual is not shape:
        raise ShapeMismatchError(shape.value, actual.value)

    try:
        if shape is Shape.LIST:
            return TypeAdapter(list[model]).validate_python(value)
        return model.model_validate(value)
    except ValidationError as e:
        raise ParseError(f"response does not match {model.__name__}: {e}") from e
