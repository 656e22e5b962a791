"""Send compilation jobs to Wandbox and retrieve its compilers list.

[`Wandbox`][wandbox.client.Wandbox] blocks the caller during the HTTP call, \
[`AsyncWandbox`][wandbox.client.AsyncWandbox] suspends the calling coroutine instead. \
Each call is a single best-effort HTTP request: nothing is retried and nothing is \
cached.
"""

from collections.abc import Iterable
from logging import getLogger
from types import TracebackType
from typing import Self

from niquests import AsyncSession, Response, Session
from niquests.exceptions import RequestException
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .builder import CompilationBuilder
from .catalog import CompilerCatalog
from .exceptions import NetworkError, ParseError
from .models import CompilationRequest, CompilationResult, Compiler

DEFAULT_BASE_URL = "https://wandbox.org/api"
DEFAULT_TIMEOUT = 60.0

_HEADERS = {"Content-Type": "application/json; charset=utf-8"}
_compilers_adapter = TypeAdapter(list[Compiler])
_logger = getLogger(__name__)


def _as_request(
    job: CompilationBuilder | CompilationRequest, catalog: CompilerCatalog | None
) -> CompilationRequest:
    if isinstance(job, CompilationBuilder):
        return job.build(catalog)
    return job


def _check_status(response: Response, url: str) -> None:
    _logger.debug("%s replied with status %s", url, response.status_code)
    if not response.ok:
        msg = (
            f"Wandbox replied with status {response.status_code}, it could be "
            "experiencing an outage"
        )
        raise NetworkError(msg, status_code=response.status_code)


def _parse_result(response: Response) -> CompilationResult:
    try:
        return CompilationResult.model_validate_json(response.content or b"")
    except PydanticValidationError as e:
        msg = f"unexpected compilation result from Wandbox: {e}"
        raise ParseError(msg) from e


def _parse_catalog(
    response: Response,
    ignored_compilers: Iterable[str] | None,
    ignored_languages: Iterable[str] | None,
) -> CompilerCatalog:
    try:
        compilers = _compilers_adapter.validate_json(response.content or b"")
    except PydanticValidationError as e:
        msg = f"unexpected compilers list from Wandbox: {e}"
        raise ParseError(msg) from e
    catalog = CompilerCatalog(compilers, ignored_compilers, ignored_languages)
    _logger.info("Retrieved %d compilers from Wandbox", len(catalog))
    return catalog


def _transport_error(url: str, error: RequestException) -> NetworkError:
    return NetworkError(f"could not reach Wandbox at {url}: {error}")


class _WandboxBase:
    def __init__(self, base_url: str, timeout: float) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def compile_url(self) -> str:
        return f"{self._base_url}/compile.json"

    @property
    def list_url(self) -> str:
        return f"{self._base_url}/list.json"

    def _prepare(
        self,
        job: CompilationBuilder | CompilationRequest,
        catalog: CompilerCatalog | None,
    ) -> CompilationRequest:
        request = _as_request(job, catalog)
        target = (
            job.configured_target
            if isinstance(job, CompilationBuilder)
            else request.compiler
        )
        _logger.info(
            "Dispatching compilation job for target %s to compiler %s",
            target,
            request.compiler,
        )
        return request


class Wandbox(_WandboxBase):
    """Client handle for the Wandbox API.

    Args:
        base_url: Root of the API, the endpoints are resolved relatively to it.
        timeout: Timeout of each HTTP call, in seconds.
        session: Session to send the requests with. A new one is created if none \
            is given.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: Session | None = None,
    ) -> None:
        super().__init__(base_url, timeout)
        self._session = Session() if session is None else session

    def dispatch(
        self,
        job: CompilationBuilder | CompilationRequest,
        catalog: CompilerCatalog | None = None,
    ) -> CompilationResult:
        """Send a compilation job to Wandbox and wait for its result.

        Args:
            job: Either a configured builder, built right before sending, or a \
                request built beforehand.
            catalog: Compilers list used to resolve the target of a builder.

        Raises:
            ValidationError: Raised before any network access if the job is \
                incomplete.
            NetworkError: Raised if Wandbox could not be reached or replied with an \
                error status.
            ParseError: Raised if the reply is not a compilation result.

        Returns:
            The result of the compilation.
        """
        request = self._prepare(job, catalog)
        try:
            response = self._session.post(
                self.compile_url,
                json=request.to_json(),
                headers=_HEADERS,
                timeout=self._timeout,
            )
        except RequestException as e:
            raise _transport_error(self.compile_url, e) from e
        _check_status(response, self.compile_url)
        return _parse_result(response)

    def compilers(
        self,
        ignored_compilers: Iterable[str] | None = None,
        ignored_languages: Iterable[str] | None = None,
    ) -> CompilerCatalog:
        """Retrieve the compilers offered by Wandbox.

        Raises:
            NetworkError: Raised if Wandbox could not be reached or replied with an \
                error status.
            ParseError: Raised if the reply is not a compilers list.
        """
        try:
            response = self._session.get(self.list_url, timeout=self._timeout)
        except RequestException as e:
            raise _transport_error(self.list_url, e) from e
        _check_status(response, self.list_url)
        return _parse_catalog(response, ignored_compilers, ignored_languages)

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()


class AsyncWandbox(_WandboxBase):
    """Asynchronous client handle for the Wandbox API.

    Same as [`Wandbox`][wandbox.client.Wandbox], with coroutines. Concurrent \
    dispatches are independent from each other.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: AsyncSession | None = None,
    ) -> None:
        super().__init__(base_url, timeout)
        self._session = AsyncSession() if session is None else session

    async def dispatch(
        self,
        job: CompilationBuilder | CompilationRequest,
        catalog: CompilerCatalog | None = None,
    ) -> CompilationResult:
        request = self._prepare(job, catalog)
        try:
            response = await self._session.post(
                self.compile_url,
                json=request.to_json(),
                headers=_HEADERS,
                timeout=self._timeout,
            )
        except RequestException as e:
            raise _transport_error(self.compile_url, e) from e
        _check_status(response, self.compile_url)
        return _parse_result(response)

    async def compilers(
        self,
        ignored_compilers: Iterable[str] | None = None,
        ignored_languages: Iterable[str] | None = None,
    ) -> CompilerCatalog:
        try:
            response = await self._session.get(self.list_url, timeout=self._timeout)
        except RequestException as e:
            raise _transport_error(self.list_url, e) from e
        _check_status(response, self.list_url)
        return _parse_catalog(response, ignored_compilers, ignored_languages)

    async def close(self) -> None:
        await self._session.close()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        await self.close()
