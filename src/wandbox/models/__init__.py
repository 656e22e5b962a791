"""Modules containing model classes for the different parts of wandbox.

- [`compilation`][wandbox.models.compilation] contains the models of a compilation \
    job: the request sent to Wandbox and the result it replies with
- [`compilers`][wandbox.models.compilers] contains the models of the compiler list \
    offered by Wandbox
- [`scalars`][wandbox.models.scalars] contains NewTypes that help disambiguate the \
    many strings flowing through the package
"""

from .compilation import CompilationRequest, CompilationResult, SourceFile
from .compilers import Compiler, Language
from .scalars import CompilerName, LanguageName

__all__ = [
    "CompilationRequest",
    "CompilationResult",
    "Compiler",
    "CompilerName",
    "Language",
    "LanguageName",
    "SourceFile",
]
