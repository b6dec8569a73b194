import pytest

from openclaw_sandbox.exceptions import UnsupportedLanguageError
from openclaw_sandbox.languages import (
    CompiledStrategy,
    InterpretedStrategy,
    LanguageRegistry,
    build_default_registry,
)

ALIASES = [
    ("python3", "python"),
    ("py", "python"),
    ("js", "javascript"),
    ("node", "javascript"),
    ("ts", "typescript"),
    ("sh", "bash"),
    ("shell", "bash"),
    ("rb", "ruby"),
    ("pl", "perl"),
    ("c++", "cpp"),
    ("golang", "go"),
    ("rs", "rust"),
    ("kt", "kotlin"),
    ("kts", "kotlin"),
]


@pytest.fixture
def registry() -> LanguageRegistry:
    return build_default_registry()


@pytest.mark.parametrize("alias,canonical", ALIASES)
def test_alias_resolves_to_same_strategy(registry: LanguageRegistry, alias: str, canonical: str) -> None:
    assert registry.resolve(alias) is registry.resolve(canonical)


def test_supported_languages(registry: LanguageRegistry) -> None:
    assert registry.supported() == [
        "python",
        "javascript",
        "typescript",
        "bash",
        "zsh",
        "ruby",
        "php",
        "perl",
        "lua",
        "r",
        "c",
        "cpp",
        "go",
        "rust",
        "swift",
        "java",
        "kotlin",
    ]


def test_lookup_is_case_insensitive_and_trimmed(registry: LanguageRegistry) -> None:
    assert registry.resolve("  PyThOn\n").name == "python"
    assert registry.resolve("C++").name == "cpp"
    assert "JS" in registry
    assert "cobol" not in registry
    assert 42 not in registry


def test_unknown_language_lists_supported(registry: LanguageRegistry) -> None:
    with pytest.raises(UnsupportedLanguageError) as exc_info:
        registry.resolve("cobol")

    err = exc_info.value
    assert err.language == "cobol"
    assert err.supported == registry.supported()
    assert str(err).startswith("Unsupported language: cobol. Supported: python, javascript, typescript")
    assert isinstance(err, ValueError)


def test_interpreted_strategy_commands(registry: LanguageRegistry) -> None:
    strategy = registry.resolve("python")
    assert isinstance(strategy, InterpretedStrategy)
    assert strategy.kind == "interpreted"
    assert strategy.extension == "py"
    assert strategy.run_command("/tmp/run/run_abc.py") == "python3 /tmp/run/run_abc.py"
    assert strategy.artifact_paths("/tmp/run/run_abc.py") == []


def test_compiled_strategy_chains_build_and_run(registry: LanguageRegistry) -> None:
    strategy = registry.resolve("c")
    assert isinstance(strategy, CompiledStrategy)
    assert strategy.kind == "compiled"

    path = "/tmp/run/run_abc.c"
    assert strategy.build_command(path) == "gcc /tmp/run/run_abc.c -o /tmp/run/run_abc.c.out -lm"
    assert strategy.run_command(path) == (
        "gcc /tmp/run/run_abc.c -o /tmp/run/run_abc.c.out -lm && /tmp/run/run_abc.c.out"
    )
    assert strategy.artifact_paths(path) == ["/tmp/run/run_abc.c.out"]


def test_kotlin_cleans_up_jar(registry: LanguageRegistry) -> None:
    path = "/tmp/run/run_abc.kt"
    strategy = registry.resolve("kotlin")
    assert strategy.artifact_paths(path) == ["/tmp/run/run_abc.kt.jar"]
    assert strategy.run_command(path).endswith("&& java -jar /tmp/run/run_abc.kt.jar")


@pytest.mark.parametrize("language", ["go", "java"])
def test_self_cleaning_runtimes_have_no_artifacts(registry: LanguageRegistry, language: str) -> None:
    strategy = registry.resolve(language)
    assert isinstance(strategy, CompiledStrategy)
    assert strategy.artifact_paths("/tmp/run/run_abc.x") == []
    assert "&&" not in strategy.run_command("/tmp/run/run_abc.x")


def test_every_strategy_runs_the_given_file(registry: LanguageRegistry) -> None:
    for name in registry.supported():
        strategy = registry.resolve(name)
        path = f"/scratch/run_deadbeef.{strategy.extension}"
        assert path in strategy.run_command(path), name


def test_register_rejects_duplicate_ids() -> None:
    registry = LanguageRegistry()
    registry.register(InterpretedStrategy("python", "py", "python3 {path}"), "py")

    with pytest.raises(ValueError, match="already registered"):
        registry.register(InterpretedStrategy("pypy", "py", "pypy3 {path}"), "PY")


def test_aliases_map_to_canonical(registry: LanguageRegistry) -> None:
    aliases = registry.aliases()
    assert aliases["py"] == "python"
    assert aliases["python"] == "python"
    assert aliases["kts"] == "kotlin"
