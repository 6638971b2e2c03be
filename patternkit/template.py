"""Template method pattern: a fixed compile sequence with pluggable steps."""

from __future__ import annotations

from abc import ABC, abstractmethod


class CompilerTemplate(ABC):
    """Compiles by running four steps in a fixed order."""

    def compile(self) -> None:
        self.lexical_analysis()
        self.syntax_analysis()
        self.semantic_analysis()
        self.generate_obj_code()

    @abstractmethod
    def lexical_analysis(self) -> None: ...

    @abstractmethod
    def syntax_analysis(self) -> None: ...

    @abstractmethod
    def semantic_analysis(self) -> None: ...

    @abstractmethod
    def generate_obj_code(self) -> None: ...


class _LanguageCompiler(CompilerTemplate):
    language = ""

    def _step(self, name: str) -> None:
        print(f"execute {self.language} {name}...")

    def lexical_analysis(self) -> None:
        self._step("LexicalAnalysis")

    def syntax_analysis(self) -> None:
        self._step("SyntaxAnalysis")

    def semantic_analysis(self) -> None:
        self._step("SemanticAnalysis")

    def generate_obj_code(self) -> None:
        self._step("GenerateObjCode")


class CppCompiler(_LanguageCompiler):
    language = "C++"


class JavaCompiler(_LanguageCompiler):
    language = "Java"