import re
from operator import attrgetter
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from string_analyzer.exceptions import InvalidFilterValue
from string_analyzer.schemas.string_record import StringProperties, StringRecord

TRUE_VALUES = {"true", "1"}
FALSE_VALUES = {"false", "0"}
INTEGER_PATTERN = re.compile(r"[0-9]+")


class FilterSpec(BaseModel):
    """Structured filters; unset fields do not constrain, set fields are ANDed."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    is_palindrome: Optional[bool] = None
    min_length: Optional[int] = Field(None, ge=0)
    max_length: Optional[int] = Field(None, ge=0)
    word_count: Optional[int] = Field(None, ge=0)
    contains_character: Optional[str] = Field(None, min_length=1, max_length=1)

    @field_validator("is_palindrome", mode="before")
    @classmethod
    def parse_boolean(cls, v):
        if v is None or isinstance(v, bool):
            return v
        text = str(v).strip().lower()
        if text in TRUE_VALUES:
            return True
        if text in FALSE_VALUES:
            return False
        raise ValueError("must be one of true, false, 1, 0")

    @field_validator("min_length", "max_length", "word_count", mode="before")
    @classmethod
    def parse_plain_integer(cls, v):
        # Query strings must be bare ASCII digits, no sign, spaces, dots or underscores
        if isinstance(v, str) and not INTEGER_PATTERN.fullmatch(v):
            raise ValueError("must be a non-negative integer")
        return v

    @classmethod
    def parse(cls, raw: Mapping[str, Any]) -> "FilterSpec":
        """Validate untyped input such as query parameters.

        Raises InvalidFilterValue naming every bad field; nothing is applied
        partially.
        """
        try:
            return cls.model_validate({k: v for k, v in raw.items() if v is not None})
        except ValidationError as exc:
            errors = {}
            for error in exc.errors():
                field = str(error["loc"][0]) if error["loc"] else "filters"
                errors[field] = error["msg"]
            raise InvalidFilterValue(errors) from exc

    def applied(self) -> Dict[str, Any]:
        """Only the filters that were actually set"""
        return self.model_dump(exclude_none=True)


PREDICATES: Dict[str, Callable[[StringProperties, Any], bool]] = {
    "is_palindrome": lambda props, expected: props.is_palindrome == expected,
    "min_length": lambda props, expected: props.length >= expected,
    "max_length": lambda props, expected: props.length <= expected,
    "word_count": lambda props, expected: props.word_count == expected,
    # Raw value, case-sensitive
    "contains_character": lambda props, expected: expected in props.character_frequency_map,
}


def matches(properties: StringProperties, filters: FilterSpec) -> bool:
    return all(
        PREDICATES[field](properties, expected)
        for field, expected in filters.applied().items()
    )


def evaluate(records: Iterable[StringRecord], filters: FilterSpec) -> List[StringRecord]:
    """Return the records satisfying every filter, newest first"""
    selected = [record for record in records if matches(record.properties, filters)]
    return sorted(selected, key=attrgetter("created_at"), reverse=True)
