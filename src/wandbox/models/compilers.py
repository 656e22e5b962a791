from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

from .scalars import CompilerName, LanguageName


class Compiler(BaseModel):
    """Entry of the compiler list offered by Wandbox."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: CompilerName
    version: str
    language: str
    display_compile_command: str = Field(default="", alias="display-compile-command")
    compiler_option_raw: bool = Field(default=False, alias="compiler-option-raw")
    runtime_option_raw: bool = Field(default=False, alias="runtime-option-raw")


@dataclass(frozen=True)
class Language:
    name: LanguageName
    compilers: tuple[Compiler, ...]

    @property
    def default_compiler(self) -> Compiler:
        return self.compilers[0]
