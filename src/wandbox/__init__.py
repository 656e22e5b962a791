from typing import Any

__version__ = "0.1.0"
app_name = "wandbox"


def __getattr__(name: str) -> Any:
    """Lazy-load the public API of the wandbox package.

    The command line entry point (the main function of the wandbox.cli.__init__ \
    file) has to setup logging before the modules that log are loaded. Loading \
    wandbox.cli.__init__ entails loading wandbox.__init__ first, so the public \
    attributes are only imported when they are first accessed.

    Args:
        name: Name of the attribute to load.

    Raises:
        AttributeError: Raised if the name doesn't match a lazy-loadable attribute.

    Returns:
        Lazy-loaded attribute.
    """
    match name:
        case "Wandbox" | "AsyncWandbox":
            from . import client

            return getattr(client, name)
        case "CompilationBuilder":
            from .builder import CompilationBuilder

            return CompilationBuilder
        case "CompilerCatalog":
            from .catalog import CompilerCatalog

            return CompilerCatalog
        case "CompilationRequest" | "CompilationResult" | "SourceFile":
            from . import models

            return getattr(models, name)
        case "WandboxError" | "ValidationError" | "NetworkError" | "ParseError":
            from . import exceptions

            return getattr(exceptions, name)
        case _:
            msg = f"cannot find the attribute {name} in module {__name__}"
            raise AttributeError(msg)
