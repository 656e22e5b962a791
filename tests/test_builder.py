from pydantic import ValidationError as PydanticValidationError
from pytest import fixture, raises

from wandbox.builder import CompilationBuilder
from wandbox.catalog import CompilerCatalog
from wandbox.exceptions import ValidationError
from wandbox.models import Compiler, SourceFile


@fixture
def catalog(compilers: list[Compiler]) -> CompilerCatalog:
    return CompilerCatalog(compilers)


def test_build_without_target() -> None:
    with raises(ValidationError, match="target"):
        CompilationBuilder().code("int main(){}").build()


def test_build_without_code() -> None:
    with raises(ValidationError, match="code"):
        CompilationBuilder().target("gcc-head").build()


def test_build_without_anything() -> None:
    with raises(ValidationError, match="target, code"):
        CompilationBuilder().build()


def test_blank_fields_are_missing() -> None:
    with raises(ValidationError):
        CompilationBuilder().target("  ").code("\n\n").build()


def test_build_strips_fields() -> None:
    request = (
        CompilationBuilder()
        .target(" gcc-head\n")
        .code("\nint main(){}\n")
        .stdin(" 42 \n")
        .build()
    )
    assert request.compiler == "gcc-head"
    assert request.code == "int main(){}"
    assert request.stdin == "42"
    assert request.language is None


def test_request_json() -> None:
    request = (
        CompilationBuilder()
        .target("gcc-head")
        .code("int main(){}")
        .options(["-Wall", "-Werror"])
        .runtime_options(["--verbose"])
        .add_file("header.hpp", "#pragma once")
        .save()
        .build()
    )
    assert request.to_json() == {
        "compiler": "gcc-head",
        "code": "int main(){}",
        "compiler-option-raw": "-Wall\n-Werror",
        "runtime-option-raw": "--verbose",
        "stdin": "",
        "codes": [{"file": "header.hpp", "code": "#pragma once"}],
        "save": True,
    }


def test_files_replace_attachments() -> None:
    request = (
        CompilationBuilder()
        .target("gcc-head")
        .code("int main(){}")
        .add_file("a.hpp", "")
        .files([SourceFile(name="b.hpp", code="")])
        .build()
    )
    assert [f.name for f in request.files] == ["b.hpp"]


def test_language_target(catalog: CompilerCatalog) -> None:
    request = CompilationBuilder().target("C++").code("int main(){}").build(catalog)
    assert request.compiler == "gcc-head"
    assert request.language == "c++"
    assert request.to_json()["lang"] == "c++"


def test_compiler_target(catalog: CompilerCatalog) -> None:
    request = (
        CompilationBuilder().target("gcc-6.3.0").code("int main(){}").build(catalog)
    )
    assert request.compiler == "gcc-6.3.0"
    assert request.language == "c++"


def test_unknown_target(catalog: CompilerCatalog) -> None:
    with raises(ValidationError, match="cobol"):
        CompilationBuilder().target("cobol").code("int main(){}").build(catalog)


def test_request_is_frozen() -> None:
    request = CompilationBuilder().target("gcc-head").code("int main(){}").build()
    with raises(PydanticValidationError):
        request.code = "int main(){ return 1; }"  # type: ignore[misc]


def test_builder_changes_do_not_leak_into_built_requests() -> None:
    builder = CompilationBuilder().target("gcc-head").code("int main(){}")
    first = builder.add_file("a.hpp", "").build()
    builder.add_file("b.hpp", "")
    assert len(first.files) == 1


def test_ignored_compiler_is_not_a_target(compilers: list[Compiler]) -> None:
    catalog = CompilerCatalog(compilers, ignored_compilers={"gcc-head"})
    with raises(ValidationError, match="gcc-head"):
        CompilationBuilder().target("gcc-head").code("int main(){}").build(catalog)


def test_configured_target() -> None:
    assert CompilationBuilder().target(" c++ ").configured_target == "c++"
