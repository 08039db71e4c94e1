from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .signals import normalize_tag

DEFAULT_REVIEW_TAGS: tuple[str, ...] = ("книги", "фентези", "детектив", "триллер")


def _normalize_tag_list(values: list[str], *, allow_empty: bool) -> list[str]:
    out: list[str] = []
    seen: set[str] = set()

    for item in values:
        tag = normalize_tag(item)
        if not tag or tag in seen:
            continue
        seen.add(tag)
        out.append(tag)

    if not allow_empty and not out:
        raise ValueError("must contain at least one non-empty tag")
    return out


PositiveInt = Annotated[int, Field(ge=1)]
NonEmptyStr = Annotated[str, Field(min_length=1)]


class ClassificationConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    review_tags: list[str] = Field(default_factory=lambda: list(DEFAULT_REVIEW_TAGS))

    @field_validator("review_tags")
    @classmethod
    def _normalize_review_tags(cls, v: list[str]) -> list[str]:
        return _normalize_tag_list(v, allow_empty=False)

    def review_tag_set(self) -> frozenset[str]:
        return frozenset(self.review_tags)


class DisplayConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    untitled_review_placeholder: NonEmptyStr = "Без названия"
    note_placeholder: NonEmptyStr = "Заметка"
    date_placeholder: NonEmptyStr = "—"
    media_prefix: str = "/data_v2/"


class CatalogConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    default_category: Literal["reviews", "notes", "all"] = "all"
    top_tags: PositiveInt = 10


class AppConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    classification: ClassificationConfig = Field(default_factory=ClassificationConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
