"""Shared base for request sub-objects and their builders.

Every sub-object is a frozen pydantic model whose fields are all
optional.  A ``ModelBuilder`` collects field values through chained
setters (one per model field) and produces the frozen model on
``build()``::

    account = Account.builder().user_id("3132").build()
"""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal
from typing import Annotated, Any, Generic, TypeVar

from pydantic import AfterValidator, BaseModel, ConfigDict, PlainSerializer
from pydantic import ValidationError as PydanticValidationError

from fraud_request.core.errors import InvalidInputError
from fraud_request.observability.logger import get_logger

logger = get_logger(__name__)


# Monetary values go over the wire as JSON numbers (IEEE-754 doubles), not
# strings.  Amounts a double cannot carry are rejected at build().
def _fits_json_number(value: Decimal) -> Decimal:
    if not value.is_finite():
        return value
    as_float = float(value)
    if Decimal(as_float) != value and Decimal(repr(as_float)) != value:
        raise ValueError(f"{value} has more precision than a JSON number carries")
    return value


Amount = Annotated[
    Decimal,
    AfterValidator(_fits_json_number),
    PlainSerializer(float, return_type=float, when_used="json"),
]

ModelT = TypeVar("ModelT", bound="RequestModel")


class RequestModel(BaseModel):
    """Immutable request sub-object.  Subclasses declare the fields."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def builder(cls) -> ModelBuilder[Any]:
        """Return a fresh builder for this model."""
        return ModelBuilder(cls)

    def to_dict(self) -> dict[str, Any]:
        """Canonical JSON-ready mapping: wire names, no empty values."""
        return prune_empty(self.model_dump(mode="json", by_alias=True))


def prune_empty(value: Any) -> Any:
    """Recursively drop ``None`` values and empty containers.

    Only mapping entries are dropped.  Sequence elements are pruned inside
    but always kept, so positions survive (an empty item becomes ``{}``).
    """
    if isinstance(value, dict):
        pruned = {k: prune_empty(v) for k, v in value.items()}
        return {k: v for k, v in pruned.items() if not _is_empty(v)}
    if isinstance(value, (list, tuple)):
        return [prune_empty(v) for v in value]
    return value


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, (dict, list, tuple)) and not value)


class ModelBuilder(Generic[ModelT]):
    """Mutable collector of field values for one ``RequestModel``.

    Unknown attribute names that match a model field resolve to a
    chained setter; anything else raises ``AttributeError``.
    """

    def __init__(self, model: type[ModelT]) -> None:
        self._model = model
        self._values: dict[str, Any] = {}

    def __getattr__(self, name: str) -> Callable[[Any], ModelBuilder[ModelT]]:
        if name.startswith("_") or name not in self._model.model_fields:
            raise AttributeError(
                f"{type(self).__name__} for {self._model.__name__} has no field {name!r}"
            )

        def setter(value: Any) -> ModelBuilder[ModelT]:
            return self._set(name, value)

        setter.__name__ = name
        return setter

    def set(self, name: str, value: Any) -> ModelBuilder[ModelT]:
        """Set a field by name, e.g. from parsed input."""
        if name not in self._model.model_fields:
            raise InvalidInputError(name, value, f"unknown {self._model.__name__} field")
        return getattr(self, name)(value)

    def _set(self, name: str, value: Any) -> ModelBuilder[ModelT]:
        self._values[name] = value
        return self

    def build(self) -> ModelT:
        """Return a frozen model built from the values set so far."""
        try:
            return self._model(**self._values)
        except PydanticValidationError as exc:
            error = exc.errors()[0]
            field = str(error["loc"][0]) if error["loc"] else self._model.__name__
            logger.info(
                "builder.rejected_value",
                model=self._model.__name__,
                field=field,
                reason=error["msg"],
            )
            raise InvalidInputError(
                field, self._values.get(field), error["msg"]
            ) from exc
