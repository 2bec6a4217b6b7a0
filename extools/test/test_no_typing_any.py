from __future__ import annotations

import ast
from pathlib import Path


def _typing_any_uses(tree: ast.AST, rel: Path) -> list[str]:
    offenders: list[str] = []
    typing_aliases: set[str] = set()

    for node in ast.walk(tree):
        match node:
            case ast.Import(names=names):
                for alias in names:
                    if alias.name == "typing":
                        typing_aliases.add(alias.asname or "typing")
            case ast.ImportFrom(module="typing", names=names):
                for alias in names:
                    if alias.name == "Any":
                        offenders.append(f"{rel}:{node.lineno}: from typing import Any")
            case _:
                pass

    for node in ast.walk(tree):
        if (
            isinstance(node, ast.Attribute)
            and node.attr == "Any"
            and isinstance(node.value, ast.Name)
            and node.value.id in typing_aliases
        ):
            offenders.append(f"{rel}:{node.lineno}: {node.value.id}.Any")

    return offenders


def test_no_typing_any_in_extools() -> None:
    """Explicit typing.Any is forbidden in extools/.

    Inputs of unknown shape are typed as ``object`` and narrowed with
    isinstance checks (see extools.core.config).
    """
    root = Path(__file__).resolve().parents[1]
    offenders: list[str] = []

    for path in root.rglob("*.py"):
        rel = path.relative_to(root)
        if any(part.startswith(".") or part == "__pycache__" for part in rel.parts):
            continue
        tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(rel))
        offenders.extend(_typing_any_uses(tree, rel))

    assert not offenders, "Explicit typing.Any is forbidden:\n" + "\n".join(sorted(offenders))


def test_guard_catches_both_spellings() -> None:
    source = "import typing as t\nfrom typing import Any\nx: t.Any\n"
    found = _typing_any_uses(ast.parse(source), Path("sample.py"))
    assert found == ["sample.py:2: from typing import Any", "sample.py:3: t.Any"]
