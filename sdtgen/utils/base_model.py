import re
from typing import Any

from pydantic import BaseModel as PydanticBaseModel


_ARGS_BLOCK = re.compile(
    r'\n\s*Args:\s*\n(.*?)(?:\n\s*\n|\n\s*[A-Z][a-z]+:|\Z)',
    re.DOTALL,
)
_ARG_LINE = re.compile(r'^\s*(\w+):\s*(.*)$')


def parse_docstring_args(docstring: str | None) -> dict[str, str]:
    """Extract ``name: description`` pairs from a docstring Args block.

    Continuation lines are folded into the preceding entry.
    """
    if not docstring:
        return {}

    args_match = _ARGS_BLOCK.search(docstring)
    if not args_match:
        return {}

    descriptions: dict[str, list[str]] = {}
    current_field = None

    for line in args_match.group(1).split('\n'):
        field_match = _ARG_LINE.match(line)
        if field_match:
            current_field = field_match.group(1)
            first_part = field_match.group(2).strip()
            descriptions[current_field] = [first_part] if first_part else []
        elif current_field and line.strip():
            descriptions[current_field].append(line.strip())

    return {
        name: ' '.join(parts).strip()
        for name, parts in descriptions.items()
        if parts
    }


class BaseModel(PydanticBaseModel):
    """Custom BaseModel.

    Extends Pydantic's BaseModel so that field descriptions are filled from
    the Args block of the class docstring once, when the class is defined.
    The CLI reuses these descriptions as option help text.
    """

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)

        for name, description in parse_docstring_args(cls.__doc__).items():
            field_info = cls.model_fields.get(name)
            if field_info is not None and field_info.description is None:
                field_info.description = description

    @classmethod
    def describe(cls, field_name: str) -> str:
        """Return the documented description of a field, or an empty string.
        """
        field_info = cls.model_fields[field_name]
        return field_info.description or ''
