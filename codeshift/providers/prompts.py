"""System prompts for the three translation directions.

A request either describes code in prose ("Natural Language" as the input
language), asks for prose about code ("Natural Language" as the output
language), or translates between two programming languages. Each direction
has one fixed template anchored by a tiny example so that small local models
keep a consistent output style.
"""

from __future__ import annotations

from enum import Enum

NATURAL_LANGUAGE = "Natural Language"

NATURAL_TO_CODE_TEMPLATE = """\
You are an expert programmer in all programming languages. \
Translate the natural language to "{output_language}" code. \
Do not include ```.

Example translating from natural language to JavaScript:

Natural language:
Print the numbers 0 to 9.

JavaScript code:
for (let i = 0; i < 10; i++) {{
  console.log(i);
}}

Natural language:
{input_code}

{output_language} code (no ```):
"""

CODE_TO_NATURAL_TEMPLATE = """\
You are an expert programmer in all programming languages. \
Translate the "{input_language}" code to natural language in plain English \
that the average adult could understand. \
Respond as bullet points starting with -.

Example translating from JavaScript to natural language:

JavaScript code:
for (let i = 0; i < 10; i++) {{
  console.log(i);
}}

Natural language:
Print the numbers 0 to 9.

{input_language} code:
{input_code}

Natural language:
"""

CODE_TO_CODE_TEMPLATE = """\
You are an expert programmer in all programming languages. \
Translate the "{input_language}" code to "{output_language}" code. \
Do not include ```.

Example translating from JavaScript to Python:

JavaScript code:
for (let i = 0; i < 10; i++) {{
  console.log(i);
}}

Python code:
for i in range(10):
    print(i)

{input_language} code:
{input_code}

{output_language} code (no ```):
"""


def _is_natural_language(language: str) -> bool:
    return " ".join(language.split()).casefold() == NATURAL_LANGUAGE.casefold()


class TranslationMode(str, Enum):
    NATURAL_TO_CODE = "natural_to_code"
    CODE_TO_NATURAL = "code_to_natural"
    CODE_TO_CODE = "code_to_code"

    @classmethod
    def select(cls, input_language: str, output_language: str) -> "TranslationMode":
        """Pick the direction for a language pair.

        "Natural Language" is matched ignoring case and surrounding/duplicated
        whitespace, so "natural  language" is never mistaken for a programming
        language name.
        """
        if _is_natural_language(input_language):
            return cls.NATURAL_TO_CODE
        if _is_natural_language(output_language):
            return cls.CODE_TO_NATURAL
        return cls.CODE_TO_CODE

    @property
    def template(self) -> str:
        return _TEMPLATES[self]


_TEMPLATES = {
    TranslationMode.NATURAL_TO_CODE: NATURAL_TO_CODE_TEMPLATE,
    TranslationMode.CODE_TO_NATURAL: CODE_TO_NATURAL_TEMPLATE,
    TranslationMode.CODE_TO_CODE: CODE_TO_CODE_TEMPLATE,
}


def create_prompt(input_language: str, output_language: str, input_code: str) -> str:
    """Build the system prompt for one translation request."""
    mode = TranslationMode.select(input_language, output_language)
    return mode.template.format(
        input_language=input_language,
        output_language=output_language,
        input_code=input_code,
    )
