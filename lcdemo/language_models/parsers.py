"""
Parsing of structured output from the text returned by a model.

JSON and comma-separated lists are parsed with the Langchain output
parsers, which also accept JSON wrapped in markdown code fences. The
parsed JSON is validated into pydantic models. The simpler formats
(key-value lines, yes/no answers, markdown sections) are parsed
directly.

Expected behaviour:
    parse_json_output, parse_person and parse_movies raise
    OutputParserException or ValidationError on invalid input.
"""

from typing import Any

from pydantic import BaseModel, Field, TypeAdapter

from langchain_core.output_parsers import (
    CommaSeparatedListOutputParser,
    JsonOutputParser,
)


class Person(BaseModel):
    name: str
    age: int
    occupation: str
    hobbies: list[str] = Field(default_factory=list)


class Movie(BaseModel):
    title: str
    year: int
    director: str


_movies_adapter = TypeAdapter(list[Movie])


def parse_json_output(text: str) -> Any:
    """The JSON object or array in text, which may be wrapped in a
    ```json fenced block."""
    return JsonOutputParser().parse(text)


def parse_person(text: str) -> Person:
    return Person.model_validate(parse_json_output(text))


def parse_movies(text: str) -> list[Movie]:
    return _movies_adapter.validate_python(parse_json_output(text))


def parse_comma_list(text: str) -> list[str]:
    """Items of a comma-separated list, trimmed."""
    items = CommaSeparatedListOutputParser().parse(text.strip())
    return [item.strip() for item in items if item.strip()]


def parse_key_values(text: str) -> dict[str, str]:
    """'Key: Value' lines into a dictionary. Lines without a colon are
    ignored; the value is what follows the first colon."""
    attributes: dict[str, str] = {}
    for line in text.splitlines():
        key, sep, value = line.partition(":")
        if sep:
            attributes[key.strip()] = value.strip()
    return attributes


def parse_yes_no(text: str) -> bool:
    """True if the answer is 'yes'."""
    return text.strip().lower() == "yes"


def count_markdown_sections(text: str) -> int:
    """Number of '##' section markers in a markdown text."""
    return len(text.split("##")) - 1
