class WandboxError(Exception):
    pass


class ValidationError(WandboxError):
    pass


class NetworkError(WandboxError):
    def __init__(self, msg: str, status_code: int | None = None) -> None:
        super().__init__(msg)
        self.status_code = status_code


class ParseError(WandboxError):
    pass
