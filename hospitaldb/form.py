"""An entry form for adding one record to a table."""

from __future__ import annotations

from collections.abc import Mapping

from hospitaldb.tables import ElementType, columns_of, describe_field, validate_field

__all__ = ["EntryForm", "InvalidFieldError"]

_PROMPT_PREFIX = "Введите "
_LABEL_PADDING = 20


class InvalidFieldError(ValueError):
    """A value entered into the form is not acceptable for its field."""

    def __init__(self, field: str, value: str, message: str | None = None) -> None:
        super().__init__(message or f"invalid value for {field!r}: {value!r}")
        self.field = field
        self.value = value


class EntryForm:
    """The fields of a table, except its id, with their prompts and validation."""

    def __init__(self, form_type: ElementType) -> None:
        columns = columns_of(form_type)
        if not columns:
            raise ValueError(f"{form_type.name} has no fields to enter")
        self.form_type = form_type
        self._fields = columns[1:]

    def fields(self) -> list[str]:
        """Names of the fields to fill, in table order."""
        return list(self._fields)

    def prompts(self) -> dict[str, str]:
        """Prompt text for each field, in table order."""
        return {field: _PROMPT_PREFIX + describe_field(field) for field in self._fields}

    def label_width(self) -> int:
        """Width, in characters, given to every label: the longest description plus padding."""
        longest = max((len(describe_field(field)) for field in self._fields), default=0)
        return longest + _LABEL_PADDING

    def collect(self, values: Mapping[str, str]) -> list[str]:
        """Check the entered values and return them in field order.

        A field left out is taken as empty; an empty field is accepted as is.
        """
        unknown = [key for key in values if key not in self._fields]
        if unknown:
            key = unknown[0]
            raise InvalidFieldError(key, values[key], f"unknown field {key!r}")
        result = []
        for field in self._fields:
            text = values.get(field, "")
            if text and not validate_field(field, text):
                raise InvalidFieldError(field, text)
            result.append(text)
        return result