from pathlib import Path

from . import app


@app.command()
def run(
    target: str,
    source: Path,
    /,
    *,
    option: list[str] | None = None,
    runtime_option: list[str] | None = None,
    stdin: Path | None = None,
    file: list[Path] | None = None,
    save: bool | None = None,
    workdir: Path = Path(),
) -> None:
    """Compile SOURCE with TARGET on Wandbox and run it.

    TARGET can be a language, like c++, or a compiler, like gcc-head.

    Args:
        target: Language or compiler to compile the file with
        source: Path of the source file to compile
        option: Compiler option, repeat for several ones (--option=-Wall)
        runtime_option: Option given to the compiled program
        stdin: Path of a file whose content is given as standard input
        file: Path of an additional file, like a header, sent along SOURCE
        save: Ask Wandbox for a permanent link to the compilation
        workdir: Path to move into before running the command

    """
    from logging import getLogger

    from rich.console import Console

    from ..builder import CompilationBuilder
    from ..configuring.settings import Settings
    from ..utils import read_text

    logger = getLogger(__name__)
    settings = Settings.from_yaml(workdir)
    builder = (
        CompilationBuilder()
        .target(target)
        .code(read_text(workdir / source))
        .options([*settings.default_options, *(option or [])])
        .runtime_options(runtime_option or [])
        .save(settings.save if save is None else save)
    )
    if stdin is not None:
        builder.stdin(read_text(workdir / stdin))
    for path in file or []:
        builder.add_file(path.name, read_text(workdir / path))

    console = Console(highlight=False)
    with settings.client() as client:
        with console.status("Retrieving compilers"):
            catalog = client.compilers(
                settings.ignored_compilers, settings.ignored_languages
            )
        with console.status("Compiling"):
            request = builder.build(catalog)
            logger.info(
                "Compiling with [green]%s[/]", request.compiler, extra={"markup": True}
            )
            result = client.dispatch(request)

    if result.compiler_message:
        console.rule("[bold]Compiler[/]", align="left")
        console.print(result.compiler_message, markup=False, end="")
    if result.program_message:
        console.rule("[bold]Program[/]", align="left")
        console.print(result.program_message, markup=False, end="")
    if result.url:
        logger.info(
            "Compilation saved [link=%s]on Wandbox[/link]",
            result.url,
            extra={"markup": True},
        )
    if not result.ok:
        logger.error(
            "Exited with status %s%s",
            result.status or "unknown",
            f" (signal {result.signal})" if result.signal else "",
        )
        raise SystemExit(1)
