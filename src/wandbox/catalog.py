"""Index the compilers offered by Wandbox by language."""

from collections import defaultdict
from collections.abc import Iterable
from logging import getLogger

from .exceptions import ValidationError
from .models import Compiler, CompilerName, Language, LanguageName

_logger = getLogger(__name__)


class CompilerCatalog:
    """Compilers offered by Wandbox, grouped by lowercase language name.

    The order of the compilers list returned by Wandbox is preserved: the first \
    compiler of each language is its default compiler. The catalog is never mutated \
    once built.

    Args:
        compilers: Compilers as listed by the `list.json` endpoint.
        ignored_compilers: Names of compilers to leave out, typically compilers \
            that are known to be broken on Wandbox.
        ignored_languages: Names of languages to leave out, case insensitive.
    """

    def __init__(
        self,
        compilers: Iterable[Compiler],
        ignored_compilers: Iterable[str] | None = None,
        ignored_languages: Iterable[str] | None = None,
    ) -> None:
        skipped_compilers = frozenset(ignored_compilers or ())
        skipped_languages = frozenset(
            language.lower() for language in ignored_languages or ()
        )
        grouped: dict[LanguageName, list[Compiler]] = defaultdict(list)
        for compiler in compilers:
            language = LanguageName(compiler.language.lower())
            if compiler.name in skipped_compilers or language in skipped_languages:
                _logger.debug("Ignoring compiler %s", compiler.name)
                continue
            grouped[language].append(compiler.model_copy(update={"language": language}))
        self._languages = {
            name: Language(name=name, compilers=tuple(language_compilers))
            for name, language_compilers in grouped.items()
        }
        self._compilers = {
            compiler.name: compiler
            for language in self._languages.values()
            for compiler in language.compilers
        }

    def languages(self) -> list[Language]:
        return list(self._languages.values())

    def compilers(self, language: str) -> list[Compiler] | None:
        if (found := self._languages.get(LanguageName(language.lower()))) is None:
            return None
        return list(found.compilers)

    def is_valid_language(self, language: str) -> bool:
        return language.lower() in self._languages

    def is_valid_compiler(self, compiler: str) -> bool:
        return compiler in self._compilers

    def language_of(self, compiler: str) -> LanguageName | None:
        if (found := self._compilers.get(CompilerName(compiler))) is None:
            return None
        return LanguageName(found.language)

    def default_compiler(self, language: str) -> CompilerName | None:
        if (found := self._languages.get(LanguageName(language.lower()))) is None:
            return None
        return found.default_compiler.name

    def resolve(self, target: str) -> tuple[CompilerName, LanguageName]:
        """Resolve a compilation target into a compiler and its language.

        Args:
            target: Either a language name (`c++`), in which case its default \
                compiler is picked, or a compiler name (`gcc-head`).

        Raises:
            ValidationError: Raised if the target is neither a known language nor a \
                known compiler.

        Returns:
            The compiler to use and its language.
        """
        if (compiler := self.default_compiler(target)) is not None:
            return compiler, LanguageName(target.lower())
        if (language := self.language_of(target)) is not None:
            return CompilerName(target), language
        msg = f"unable to find a compiler or a language named {target!r}"
        raise ValidationError(msg)

    def __len__(self) -> int:
        return len(self._compilers)
