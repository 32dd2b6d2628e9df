"""Provider-side coercion of raw section data into typed instances.

String-to-primitive conversion is delegated to pydantic (lax mode), so
`"5"` binds to an `int` field and `"true"` to a `bool` field. Plain
classes nested inside plain classes are bound field by field.
"""
from __future__ import annotations
import dataclasses
import typing
from typing import Any, Dict, Iterable, Mapping, Type, TypeVar

from pydantic import BaseModel, PydanticUserError, TypeAdapter, ValidationError
from typing_extensions import is_typeddict

from src.main.utils.config import SectionConversionError
from src.main.utils.config_loader import KEY_DELIMITER

T = TypeVar('T')

_SCALAR_TYPES = (str, int, float, bool, bytes, complex)


def ensure_bindable(cls: Any) -> None:
    if not isinstance(cls, type) or cls in _SCALAR_TYPES:
        raise TypeError(f"Binding target must be a class, got {cls!r}")


def _is_plain_class(hint: Any) -> bool:
    return (
        isinstance(hint, type)
        and hint.__module__ != 'builtins'
        and not issubclass(hint, BaseModel)
        and not dataclasses.is_dataclass(hint)
        and not is_typeddict(hint)
    )


def _field_names(cls: type) -> Iterable[str]:
    if issubclass(cls, BaseModel):
        return cls.model_fields.keys()
    if dataclasses.is_dataclass(cls):
        return [f.name for f in dataclasses.fields(cls)]
    return typing.get_type_hints(cls).keys()


def _align_keys(data: Mapping[str, Any], names: Iterable[str]) -> Dict[str, Any]:
    # keys are matched to field names ignoring case; unmatched keys pass through
    by_fold = {n.casefold(): n for n in names}
    return {by_fold.get(k.casefold(), k): v for k, v in data.items()}


def _bind_plain(data: Dict[str, Any], cls: Type[T], path: str) -> T:
    instance = cls()
    hints = typing.get_type_hints(cls)
    for name, value in data.items():
        if name in hints:
            hint = hints[name]
            if _is_plain_class(hint):
                value = deserialize(value, hint, f"{path}{KEY_DELIMITER}{name}")
            else:
                value = TypeAdapter(hint).validate_python(value)
            setattr(instance, name, value)
        elif not name.startswith('_') and hasattr(instance, name):
            setattr(instance, name, value)
    return instance


def deserialize(data: Any, cls: Type[T], path: str = '') -> T:
    ensure_bindable(cls)
    if not isinstance(data, Mapping):
        raise SectionConversionError(path, cls, "section has no child keys")
    try:
        aligned = _align_keys(data, _field_names(cls))
        if issubclass(cls, BaseModel):
            return cls.model_validate(aligned)
        if dataclasses.is_dataclass(cls) or is_typeddict(cls):
            return TypeAdapter(cls).validate_python(aligned)
        return _bind_plain(aligned, cls, path)
    except ValidationError as e:
        raise SectionConversionError(path, cls, f"{e.error_count()} validation error(s)") from e
    except (PydanticUserError, TypeError, AttributeError, NameError) as e:
        raise SectionConversionError(path, cls, str(e)) from e

__all__ = ['deserialize', 'ensure_bindable']
