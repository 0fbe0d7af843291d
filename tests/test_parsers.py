"""Test structured output parsing"""

# pyright: basic

import unittest

from langchain_core.exceptions import OutputParserException
from pydantic import ValidationError

from lcdemo.language_models.parsers import (
    Movie,
    Person,
    count_markdown_sections,
    parse_comma_list,
    parse_json_output,
    parse_key_values,
    parse_movies,
    parse_person,
    parse_yes_no,
)

PERSON_JSON = """{
  "name": "John Smith",
  "age": 35,
  "occupation": "software engineer",
  "hobbies": ["hiking", "photography", "playing guitar"]
}"""


class TestJsonParsing(unittest.TestCase):

    def test_person(self):
        person = parse_person(PERSON_JSON)
        self.assertEqual(
            person,
            Person(
                name="John Smith",
                age=35,
                occupation="software engineer",
                hobbies=["hiking", "photography", "playing guitar"],
            ),
        )

    def test_fenced_json(self):
        person = parse_person("```json\n" + PERSON_JSON + "\n```")
        self.assertEqual(person.age, 35)

    def test_not_json(self):
        with self.assertRaises(OutputParserException):
            parse_json_output("yes")

    def test_missing_field(self):
        with self.assertRaises(ValidationError):
            parse_person('{"name": "John"}')

    def test_movies(self):
        movies = parse_movies(
            '[{"title": "The Godfather", "year": 1972, '
            '"director": "Francis Ford Coppola"}, '
            '{"title": "The Shawshank Redemption", "year": 1994, '
            '"director": "Frank Darabont"}]'
        )
        self.assertEqual(len(movies), 2)
        self.assertEqual(
            movies[0],
            Movie(title="The Godfather", year=1972,
                  director="Francis Ford Coppola"),
        )

    def test_movies_not_a_list(self):
        with self.assertRaises(ValidationError):
            parse_movies('{"title": "Up", "year": 2009, "director": "Docter"}')


class TestTextParsing(unittest.TestCase):

    def test_comma_list(self):
        self.assertEqual(
            parse_comma_list("spaghetti, eggs,  pecorino ,guanciale\n"),
            ["spaghetti", "eggs", "pecorino", "guanciale"],
        )

    def test_key_values(self):
        text = (
            "Here are the attributes:\n"
            "Brand: Apple\n"
            "Model: iPhone 15 Pro\n"
            "Price: $999\n"
            "Note: time 10:30\n"
        )
        self.assertEqual(
            parse_key_values(text),
            {
                'Here are the attributes': "",
                'Brand': "Apple",
                'Model': "iPhone 15 Pro",
                'Price': "$999",
                'Note': "time 10:30",
            },
        )

    def test_key_values_no_colon(self):
        self.assertEqual(parse_key_values("nothing here\n"), {})

    def test_yes_no(self):
        self.assertTrue(parse_yes_no("yes"))
        self.assertTrue(parse_yes_no("  YES\n"))
        self.assertFalse(parse_yes_no("no"))
        self.assertFalse(parse_yes_no("yes."))

    def test_markdown_sections(self):
        text = (
            "## Overview\ntext\n## Pros of REST\n- simple\n"
            "## Pros of GraphQL\n- flexible\n## Conclusion\nboth"
        )
        self.assertEqual(count_markdown_sections(text), 4)
        self.assertEqual(count_markdown_sections("no sections"), 0)


if __name__ == "__main__":
    unittest.main()
