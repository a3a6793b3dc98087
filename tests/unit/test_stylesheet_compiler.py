"""
Tests for the compiler driver with an injected compile function.
"""

import pytest
import sass
from sasstrail.compiler.driver import StylesheetCompiler
from sasstrail.shared.errors import SassCompileError
from tests.test_utils import MemoryPipeline

MAIN = "/proj/styles/main.scss"


class StructuredError(Exception):
    def __init__(self, message, file, line, column=None):
        super().__init__(message)
        self.message = message
        self.file = file
        self.line = line
        self.column = column


class FakeCompiler:
    """Stands in for sass.compile: replays imports, then returns or raises"""

    def __init__(self, imports=(), error=None):
        self.imports = list(imports)
        self.error = error
        self.kwargs = None
        self.results = []

    def __call__(self, **kwargs):
        self.kwargs = kwargs
        [(priority, callback)] = kwargs["importers"]
        for url, prev in self.imports:
            self.results.append(callback(url, prev))
        if self.error is not None:
            raise self.error
        return "a { color: red; }\n"


class TestStylesheetCompiler:
    """Compiler invocation and error wrapping"""

    def test_defaults_to_libsass(self):
        compiler = StylesheetCompiler()
        assert compiler.compile_fn is sass.compile
        assert compiler.compile_errors == (sass.CompileError,)
        assert compiler.output_style == "nested"

    def test_custom_function_catches_everything(self):
        assert StylesheetCompiler(FakeCompiler()).compile_errors == (Exception,)

    def test_compile_arguments(self):
        fake = FakeCompiler()
        pipeline = MemoryPipeline({}, roots=["/proj", "/vendor"])
        result = StylesheetCompiler(fake, output_style="compressed").compile("a {}", MAIN, pipeline)
        assert result.success
        assert result.css == "a { color: red; }\n"
        assert fake.kwargs["string"] == "a {}"
        assert fake.kwargs["include_paths"] == ["/proj/styles", "/proj", "/vendor"]
        assert fake.kwargs["indented"] is False
        assert fake.kwargs["output_style"] == "compressed"
        assert fake.kwargs["importers"][0][0] == 0
        assert fake.kwargs["importers"][0][1].__name__ == "import_callback"

    def test_indented_syntax(self):
        fake = FakeCompiler()
        StylesheetCompiler(fake).compile("a\n  color: red", "/proj/styles/main.sass", MemoryPipeline({}))
        assert fake.kwargs["indented"] is True

    def test_imports_recorded(self):
        fake = FakeCompiler(imports=[("foo", "stdin")])
        pipeline = MemoryPipeline({"/proj/styles/_foo.scss": "$c: red;"})
        result = StylesheetCompiler(fake).compile('@import "foo";', MAIN, pipeline)
        assert fake.results == [[("/proj/styles/_foo.scss", "$c: red;")]]
        assert result.dependency_tree.format() == f"{MAIN}\n└── /proj/styles/_foo.scss"

    def test_fresh_tree_per_compile(self):
        pipeline = MemoryPipeline({"/proj/styles/_foo.scss": ""})
        compiler = StylesheetCompiler(FakeCompiler(imports=[("foo", "stdin")]))
        first = compiler.compile("", MAIN, pipeline)
        compiler.compile_fn = FakeCompiler()
        second = compiler.compile("", MAIN, pipeline)
        assert first.dependency_tree is not second.dependency_tree
        assert second.dependency_tree.path_list() == []

    def test_error_in_partial_has_import_chain(self):
        error = StructuredError("Undefined variable: $x", file="/proj/styles/_bad.scss", line=2, column=8)
        fake = FakeCompiler(imports=[("bad", "stdin")], error=error)
        pipeline = MemoryPipeline({"/proj/styles/_bad.scss": "a { color: $x; }"})
        compiler = StylesheetCompiler(fake, compile_errors=(StructuredError,))
        with pytest.raises(SassCompileError) as exc_info:
            compiler.compile('@import "bad";', MAIN, pipeline)
        raised = exc_info.value
        assert str(raised) == "/proj/styles/_bad.scss(2,8): Undefined variable: $x"
        assert raised.import_chain == f"{MAIN}\n└── /proj/styles/_bad.scss"
        assert raised.__cause__ is error

    def test_error_in_document_points_at_document(self):
        error = StructuredError("Invalid CSS", file="stdin", line=3)
        fake = FakeCompiler(imports=[("foo", "stdin")], error=error)
        pipeline = MemoryPipeline({"/proj/styles/_foo.scss": ""})
        with pytest.raises(SassCompileError) as exc_info:
            StylesheetCompiler(fake, compile_errors=(StructuredError,)).compile("a {", MAIN, pipeline)
        assert exc_info.value.import_chain == MAIN
        assert exc_info.value.location.file == MAIN
        assert str(exc_info.value) == f"{MAIN}(3): Invalid CSS"

    def test_relative_error_path_made_absolute(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        document = str(tmp_path / "styles" / "main.scss")
        partial = str(tmp_path / "styles" / "_bad.scss")
        error = StructuredError("Undefined variable: $x", file="styles/_bad.scss", line=1, column=13)
        fake = FakeCompiler(imports=[("bad", "stdin")], error=error)
        pipeline = MemoryPipeline({partial: ""}, roots=[str(tmp_path)])
        compiler = StylesheetCompiler(fake, compile_errors=(StructuredError,))
        with pytest.raises(SassCompileError) as exc_info:
            compiler.compile('@import "bad";', document, pipeline)
        assert str(exc_info.value) == f"{partial}(1,13): Undefined variable: $x"
        assert exc_info.value.import_chain == f"{document}\n└── {partial}"

    def test_error_in_unseen_file_has_no_chain(self):
        error = StructuredError("oops", file="/elsewhere/_x.scss", line=1)
        compiler = StylesheetCompiler(FakeCompiler(error=error), compile_errors=(StructuredError,))
        with pytest.raises(SassCompileError) as exc_info:
            compiler.compile("", MAIN, MemoryPipeline({}))
        assert exc_info.value.import_chain is None

    def test_other_errors_propagate(self):
        compiler = StylesheetCompiler(FakeCompiler(error=ValueError("bug")), compile_errors=(StructuredError,))
        with pytest.raises(ValueError):
            compiler.compile("", MAIN, MemoryPipeline({}))


if __name__ == "__main__":
    pytest.main([__file__])
