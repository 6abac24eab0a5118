"""
Pydantic models for the trainer datasets.

A conjugation entry pairs a verb with its answer grid:

    {"verb": "parlare",
     "answers": {"present": {"io": "parlo", "tu": "parli"},
                 "past":    {"io": "ho parlato", "tu": "hai parlato"}}}

Outer keys are forms (tenses), inner keys are persons.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.errors import MalformedEntryError


class ConjugationEntry(BaseModel):
    """
    A single verb and its form x person answer grid.

    Entries are shared by every session, so the grid is stored as read-only
    mapping views.
    """
    model_config = ConfigDict(frozen=True)

    verb: str = Field(..., min_length=1, description="Infinitive shown as the prompt")
    answers: Mapping[str, Mapping[str, str]] = Field(
        ...,
        description="form -> person -> expected inflection"
    )

    @field_validator("answers", mode="after")
    @classmethod
    def freeze_answers(cls, value: Mapping[str, Mapping[str, str]]) -> Mapping[str, Mapping[str, str]]:
        return MappingProxyType({
            form: MappingProxyType(dict(row)) for form, row in value.items()
        })

    @property
    def forms(self) -> list[str]:
        return list(self.answers.keys())

    @property
    def persons(self) -> list[str]:
        """Persons in the order of the first form's grid column."""
        if not self.answers:
            return []
        first_form = next(iter(self.answers.values()))
        return list(first_form.keys())

    def validate_grid(self) -> None:
        """
        Check that every form covers the same, non-empty set of persons.

        Raises:
            MalformedEntryError: if the grid is empty or not rectangular
        """
        if not self.answers:
            raise MalformedEntryError(self.verb, "no forms")

        persons = set(self.persons)
        if not persons:
            raise MalformedEntryError(self.verb, "no persons")

        for form, row in self.answers.items():
            if set(row.keys()) != persons:
                missing = sorted(persons - set(row.keys()))
                extra = sorted(set(row.keys()) - persons)
                raise MalformedEntryError(
                    self.verb,
                    f"form '{form}' does not match the person set "
                    f"(missing={missing}, extra={extra})"
                )

    def expected(self, person: str, form: str) -> str:
        return self.answers[form][person]
