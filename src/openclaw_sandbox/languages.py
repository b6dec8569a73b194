# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_sandbox

from dataclasses import dataclass
from typing import Literal, Union

from openclaw_sandbox.exceptions import UnsupportedLanguageError


@dataclass(frozen=True)
class InterpretedStrategy:
    """Runs the scratch file directly with an interpreter.

    ``run_template`` is a format string over ``{path}``.
    """

    name: str
    extension: str
    run_template: str
    kind: Literal["interpreted"] = "interpreted"

    def run_command(self, path: str) -> str:
        return self.run_template.format(path=path)

    def artifact_paths(self, path: str) -> list[str]:
        return []


@dataclass(frozen=True)
class CompiledStrategy:
    """Builds the scratch file, then runs the product.

    ``build_template`` produces the artifacts listed in ``artifact_templates``.
    ``run_template`` chains the build and the run with ``&&`` so compiler
    diagnostics end up as the captured output when the build fails.
    """

    name: str
    extension: str
    build_template: str
    run_template: str
    artifact_templates: tuple[str, ...] = ()
    kind: Literal["compiled"] = "compiled"

    def build_command(self, path: str) -> str:
        return self.build_template.format(path=path)

    def run_command(self, path: str) -> str:
        return self.run_template.format(path=path)

    def artifact_paths(self, path: str) -> list[str]:
        return [template.format(path=path) for template in self.artifact_templates]


LanguageStrategy = Union[InterpretedStrategy, CompiledStrategy]


def _compiled(name: str, extension: str, build: str, run: str, artifacts: tuple[str, ...] = ()) -> CompiledStrategy:
    return CompiledStrategy(
        name=name,
        extension=extension,
        build_template=build,
        run_template=f"{build} && {run}" if build else run,
        artifact_templates=artifacts,
    )


class LanguageRegistry:
    """Lookup table from normalized language id to strategy."""

    def __init__(self) -> None:
        self._strategies: dict[str, LanguageStrategy] = {}
        self._aliases: dict[str, str] = {}

    @staticmethod
    def normalize(language_id: str) -> str:
        return language_id.strip().lower()

    def register(self, strategy: LanguageStrategy, *aliases: str) -> None:
        """Register a strategy under its name and any number of aliases.

        Raises:
            ValueError: If the name or an alias is already taken.
        """
        for key in (strategy.name, *aliases):
            key = self.normalize(key)
            if key in self._aliases:
                raise ValueError(f"Language id already registered: {key}")
            self._aliases[key] = strategy.name
        self._strategies[strategy.name] = strategy

    def resolve(self, language_id: str) -> LanguageStrategy:
        """Return the strategy for ``language_id``.

        Raises:
            UnsupportedLanguageError: If neither a name nor an alias matches.
        """
        canonical = self._aliases.get(self.normalize(language_id))
        if canonical is None:
            raise UnsupportedLanguageError(language_id, self.supported())
        return self._strategies[canonical]

    def supported(self) -> list[str]:
        return list(self._strategies)

    def aliases(self) -> dict[str, str]:
        return dict(self._aliases)

    def __contains__(self, language_id: object) -> bool:
        return isinstance(language_id, str) and self.normalize(language_id) in self._aliases


def build_default_registry() -> LanguageRegistry:
    """Build the registry of every language the dashboard can run."""
    registry = LanguageRegistry()

    # Interpreted
    registry.register(InterpretedStrategy("python", "py", "python3 {path}"), "python3", "py")
    registry.register(InterpretedStrategy("javascript", "js", "node {path}"), "js", "node")
    registry.register(InterpretedStrategy("typescript", "ts", "npx tsx {path}"), "ts")
    registry.register(InterpretedStrategy("bash", "sh", "bash {path}"), "sh", "shell")
    registry.register(InterpretedStrategy("zsh", "sh", "zsh {path}"))
    registry.register(InterpretedStrategy("ruby", "rb", "ruby {path}"), "rb")
    registry.register(InterpretedStrategy("php", "php", "php {path}"))
    registry.register(InterpretedStrategy("perl", "pl", "perl {path}"), "pl")
    registry.register(InterpretedStrategy("lua", "lua", "lua {path}"))
    registry.register(InterpretedStrategy("r", "R", "Rscript {path}"))

    # Compiled
    registry.register(_compiled("c", "c", "gcc {path} -o {path}.out -lm", "{path}.out", ("{path}.out",)))
    registry.register(
        _compiled("cpp", "cpp", "g++ -std=c++17 {path} -o {path}.out", "{path}.out", ("{path}.out",)),
        "c++",
    )
    # go run and java's single-file mode build into their own temp dirs
    registry.register(_compiled("go", "go", "", "go run {path}"), "golang")
    registry.register(_compiled("rust", "rs", "rustc {path} -o {path}.out", "{path}.out", ("{path}.out",)), "rs")
    registry.register(_compiled("swift", "swift", "swiftc {path} -o {path}.out", "{path}.out", ("{path}.out",)))
    registry.register(_compiled("java", "java", "", "java {path}"))
    registry.register(
        _compiled(
            "kotlin",
            "kt",
            "kotlinc {path} -include-runtime -d {path}.jar 2>&1",
            "java -jar {path}.jar",
            ("{path}.jar",),
        ),
        "kt",
        "kts",
    )

    return registry
