from collections.abc import Iterable
from logging import getLogger
from typing import TYPE_CHECKING, Self

from .exceptions import ValidationError
from .models import CompilationRequest, CompilerName, SourceFile

if TYPE_CHECKING:
    from .catalog import CompilerCatalog


class CompilationBuilder:
    """Accumulate the configuration of a compilation job.

    Setters return the builder so that calls can be chained:

        request = (
            CompilationBuilder()
            .target("gcc-head")
            .options(["-Wall", "-Werror"])
            .code('#include <iostream>\\nint main() { std::cout << "test"; }')
            .build()
        )

    Nothing is validated until [`build`][wandbox.builder.CompilationBuilder.build] \
    is called.
    """

    def __init__(self) -> None:
        self._target = ""
        self._code = ""
        self._stdin = ""
        self._options: tuple[str, ...] = ()
        self._runtime_options: tuple[str, ...] = ()
        self._files: list[SourceFile] = []
        self._save = False
        self._logger = getLogger(__name__)

    @property
    def configured_target(self) -> str:
        return self._target

    def target(self, target: str) -> Self:
        """Set the target of the compilation.

        Args:
            target: Either a language (`c++`) or a compiler (`gcc-head`). Resolving a \
                language requires a catalog when building.

        Returns:
            The builder itself.
        """
        self._target = target.strip()
        return self

    def code(self, code: str) -> Self:
        self._code = code.strip()
        return self

    def stdin(self, stdin: str) -> Self:
        self._stdin = stdin.strip()
        return self

    def options(self, options: Iterable[str]) -> Self:
        """Set the compiler options, e.g. `["-Wall", "-Werror"]`."""
        self._options = tuple(options)
        return self

    def runtime_options(self, options: Iterable[str]) -> Self:
        """Set the options given to the compiled program."""
        self._runtime_options = tuple(options)
        return self

    def add_file(self, name: str, code: str) -> Self:
        self._files.append(SourceFile(name=name, code=code))
        return self

    def files(self, files: Iterable[SourceFile]) -> Self:
        self._files = list(files)
        return self

    def save(self, save: bool = True) -> Self:
        """Ask Wandbox to save the compilation and reply with a permanent link."""
        self._save = save
        return self

    def build(self, catalog: "CompilerCatalog | None" = None) -> CompilationRequest:
        """Validate the accumulated configuration and freeze it into a request.

        Args:
            catalog: Compilers list used to resolve the target. Without it, the \
                target must be a compiler name and is used as is.

        Raises:
            ValidationError: Raised if the target or the code is missing, or if the \
                target cannot be resolved with the catalog.

        Returns:
            The request, ready to be dispatched.
        """
        missing = [
            field
            for field, value in (("target", self._target), ("code", self._code))
            if not value
        ]
        if missing:
            msg = f"missing required field(s): {', '.join(missing)}"
            raise ValidationError(msg)
        if catalog is None:
            compiler, language = CompilerName(self._target), None
        else:
            compiler, language = catalog.resolve(self._target)
            self._logger.debug("Resolved target %s to %s", self._target, compiler)
        return CompilationRequest(
            compiler=compiler,
            code=self._code,
            options=self._options,
            runtime_options=self._runtime_options,
            stdin=self._stdin,
            files=tuple(self._files),
            save=self._save,
            language=language,
        )
