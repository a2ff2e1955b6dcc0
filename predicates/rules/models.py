import re

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _compiles(value: str) -> str:
    try:
        re.compile(value)
    except re.error as e:
        raise ValueError(f"invalid pattern {value!r}: {e}") from e
    return value


class EmailRules(BaseModel):
    local_part: str = r"[a-z0-9_.-]+"
    domain: str = r"[0-9a-z.-]+"
    tld: str = r"[a-z.]{2,6}"

    @field_validator("local_part", "domain", "tld")
    @classmethod
    def _valid_pattern(cls, value: str) -> str:
        return _compiles(value)


class CellphoneRules(BaseModel):
    prefix: str = Field(default="1", pattern=r"^[0-9]+$")
    second_digits: list[str] = Field(default_factory=lambda: ["3", "5", "7", "8"], min_length=1)
    length: int = Field(default=11, ge=2)

    @field_validator("second_digits")
    @classmethod
    def _single_digits(cls, value: list[str]) -> list[str]:
        for digit in value:
            if len(digit) != 1 or digit not in "0123456789":
                raise ValueError(f"second_digits entries must be single digits, got {digit!r}")
        return value

    @model_validator(mode="after")
    def _length_covers_prefix(self) -> "CellphoneRules":
        if self.length <= len(self.prefix):
            raise ValueError("length must be greater than the prefix length")
        return self


class ChineseRules(BaseModel):
    range_start: str = Field(default="一", min_length=1, max_length=1)
    range_end: str = Field(default="龥", min_length=1, max_length=1)


class HtmlRules(BaseModel):
    tag_name: str = r"[a-z]+"

    @field_validator("tag_name")
    @classmethod
    def _valid_pattern(cls, value: str) -> str:
        return _compiles(value)


class PredicateRules(BaseModel):
    schema_version: int = Field(default=1, ge=1, le=1)
    email: EmailRules = Field(default_factory=EmailRules)
    cellphone: CellphoneRules = Field(default_factory=CellphoneRules)
    chinese: ChineseRules = Field(default_factory=ChineseRules)
    html: HtmlRules = Field(default_factory=HtmlRules)

    model_config = ConfigDict(extra="forbid")
