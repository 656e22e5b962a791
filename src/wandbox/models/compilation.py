from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from .scalars import CompilerName, LanguageName


class SourceFile(BaseModel):
    """Additional file sent along the main code, e.g. a header."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(serialization_alias="file")
    code: str


class CompilationRequest(BaseModel):
    """Body of a compilation job, as expected by the compile endpoint.

    Built by [`CompilationBuilder`][wandbox.builder.CompilationBuilder] and consumed \
    by a single dispatch. Options are kept as sequences and only joined with newlines \
    when serialized.
    """

    model_config = ConfigDict(frozen=True)

    compiler: CompilerName = Field(min_length=1)
    code: str = Field(min_length=1)
    options: tuple[str, ...] = Field(
        default=(), serialization_alias="compiler-option-raw"
    )
    runtime_options: tuple[str, ...] = Field(
        default=(), serialization_alias="runtime-option-raw"
    )
    stdin: str = ""
    files: tuple[SourceFile, ...] = Field(default=(), serialization_alias="codes")
    save: bool = False
    language: LanguageName | None = Field(default=None, serialization_alias="lang")

    @field_serializer("options", "runtime_options")
    def _join_lines(self, value: tuple[str, ...]) -> str:
        return "\n".join(value)

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class CompilationResult(BaseModel):
    """Information regarding the result of a compilation job.

    Wandbox omits the fields that have no content, they default to empty strings. \
    The `*_message` fields interleave the output and error streams.
    """

    model_config = ConfigDict(frozen=True)

    status: str = ""
    signal: str = ""
    compiler_output: str = ""
    compiler_error: str = ""
    compiler_message: str = ""
    program_output: str = ""
    program_error: str = ""
    program_message: str = ""
    permlink: str = ""
    url: str = ""

    @property
    def ok(self) -> bool:
        return self.status == "0"
