"""
Expectation models: what a caller wants a PDF to satisfy.

``ExpectationSet`` is the caller-facing input (camelCase keys on the wire).
Each present field is turned into one member of the closed ``Expectation``
union, which the validation service dispatches on.
"""
from dataclasses import dataclass
from typing import Any, ClassVar, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

from pdf_verify.core.constants import PAGE_NUM_FIELD, TITLE_FIELD, TEXT_PHRASES_FIELD


@dataclass(frozen=True)
class PageCountExpectation:
    """The PDF has exactly ``expected`` pages."""
    expected: int
    field_name: ClassVar[str] = PAGE_NUM_FIELD


@dataclass(frozen=True)
class TitleExpectation:
    """The metadata ``Title`` equals ``expected`` exactly."""
    expected: str
    field_name: ClassVar[str] = TITLE_FIELD


@dataclass(frozen=True)
class TextPhrasesExpectation:
    """Every phrase occurs literally on at least one page."""
    expected: Tuple[str, ...]
    field_name: ClassVar[str] = TEXT_PHRASES_FIELD


Expectation = Union[PageCountExpectation, TitleExpectation, TextPhrasesExpectation]


class ExpectationSet(BaseModel):
    """Things people would like to validate.

    All fields are optional; only the ones that are set get validated.
    Unknown keys are ignored.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    page_num: Optional[StrictInt] = Field(
        default=None,
        alias=PAGE_NUM_FIELD,
        description="Number of pages in the PDF"
    )
    title: Optional[StrictStr] = Field(
        default=None,
        alias=TITLE_FIELD,
        description="Title declared in the PDF metadata. The headline on the first page is not the same thing."
    )
    text_phrases: Optional[List[StrictStr]] = Field(
        default=None,
        alias=TEXT_PHRASES_FIELD,
        description="Phrases that must occur in the content of the PDF"
    )

    @classmethod
    def coerce(cls, value: Union["ExpectationSet", Mapping[str, Any], None]) -> "ExpectationSet":
        """Build an ExpectationSet from an instance, a mapping or None."""
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        return cls.model_validate(dict(value))

    def expectations(self) -> List[Expectation]:
        """Tagged expectations for every field that is set, in field order."""
        found: List[Expectation] = []
        if self.page_num is not None:
            found.append(PageCountExpectation(self.page_num))
        if self.title is not None:
            found.append(TitleExpectation(self.title))
        if self.text_phrases is not None:
            found.append(TextPhrasesExpectation(tuple(self.text_phrases)))
        return found

    @property
    def is_empty(self) -> bool:
        return not self.expectations()
