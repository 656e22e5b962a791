from logging import INFO, basicConfig, getLogger

from cyclopts import App
from rich.logging import RichHandler

app = App(name="wandbox", help="Compile and run code on Wandbox.")
app.register_install_completion_command()


def main() -> None:
    basicConfig(
        level=INFO,
        format="%(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(rich_tracebacks=True, tracebacks_show_locals=False)],
    )
    from ..exceptions import WandboxError
    from ..utils import import_module_and_submodules

    import_module_and_submodules(__name__)
    try:
        app()
    except WandboxError as e:
        getLogger(__name__).error(str(e))
        raise SystemExit(1) from e
