from pathlib import Path

from . import app


@app.command()
def compilers(language: str | None = None, /, *, workdir: Path = Path()) -> None:
    """List the languages available on Wandbox, or the compilers of LANGUAGE.

    Args:
        language: Language to list the compilers of. The first one listed is used \
            when compiling with the language as target
        workdir: Path to move into before running the command

    """
    from operator import attrgetter

    from rich.console import Console
    from rich.table import Table

    from ..configuring.settings import Settings
    from ..exceptions import ValidationError

    settings = Settings.from_yaml(workdir)
    console = Console(highlight=False)

    with settings.client() as client, console.status("Retrieving compilers"):
        catalog = client.compilers(
            settings.ignored_compilers, settings.ignored_languages
        )

    if language is None:
        table = Table("Language", "Default compiler", "Compilers")
        for lang in sorted(catalog.languages(), key=attrgetter("name")):
            table.add_row(
                lang.name, lang.default_compiler.name, f"{len(lang.compilers)}"
            )
    else:
        found = catalog.compilers(language)
        if found is None:
            msg = f"unknown language {language!r}"
            raise ValidationError(msg)
        table = Table("Compiler", "Version", "Compile command")
        for compiler in found:
            table.add_row(
                compiler.name, compiler.version, compiler.display_compile_command
            )
    console.print(table)
