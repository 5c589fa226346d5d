"""
Tests to enforce architecture constraints and prevent regressions.

These tests verify that the layered architecture is maintained:
- Domain layer: Pure business logic, no service or I/O dependencies
- Shuffler: Balancing engine; no logging, randomness or I/O of its own
  (importing config loads .env once, as any config consumer does)
- Service layer: Orchestration, depends on domain and shuffler
"""

import ast
from pathlib import Path

# Modules the pure layers must never reach for
SIDE_EFFECT_MODULES = {"logging", "random", "os", "io", "sys", "time", "threading", "asyncio"}


def get_project_root() -> Path:
    """Get the project root directory."""
    # Tests are in tests/, so go up one level
    return Path(__file__).parent.parent


def get_imports_from_file(file_path: Path) -> set[str]:
    """Extract all import statements from a Python file."""
    imports = set()
    with open(file_path, "r", encoding="utf-8") as f:
        tree = ast.parse(f.read(), filename=str(file_path))

    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                imports.add(alias.name)
        elif isinstance(node, ast.ImportFrom):
            if node.module:
                imports.add(node.module)
    return imports


def get_all_python_files(directory: Path) -> list[Path]:
    """Get all Python files in a directory recursively."""
    return list(directory.rglob("*.py"))


class TestDomainLayerConstraints:
    """Tests for domain layer architecture constraints."""

    def test_domain_has_no_service_imports(self):
        """Domain code should not import from the services layer."""
        root = get_project_root()

        for file_path in get_all_python_files(root / "domain"):
            imports = get_imports_from_file(file_path)
            service_imports = [imp for imp in imports if imp.startswith("services")]
            assert not service_imports, (
                f"{file_path.name} imports services: {service_imports}. "
                "Domain code should not depend on service layer."
            )

    def test_domain_has_no_side_effect_imports(self):
        """Domain code should stay free of logging and I/O."""
        root = get_project_root()

        for file_path in get_all_python_files(root / "domain"):
            imports = get_imports_from_file(file_path)
            bad_imports = [imp for imp in imports if imp.split(".")[0] in SIDE_EFFECT_MODULES]
            assert not bad_imports, (
                f"{file_path.name} imports {bad_imports}. "
                "Domain code should be pure."
            )


class TestShufflerConstraints:
    """Tests for the balancing engine."""

    def test_shuffler_has_no_side_effect_imports(self):
        """The shuffler module itself does not log, randomize or do I/O.

        Only direct imports are checked; the config import still loads .env.
        """
        imports = get_imports_from_file(get_project_root() / "shuffler.py")
        bad_imports = [imp for imp in imports if imp.split(".")[0] in SIDE_EFFECT_MODULES]
        assert not bad_imports, f"shuffler.py imports {bad_imports}"

    def test_shuffler_does_not_import_services(self):
        """The engine sits below the service layer."""
        imports = get_imports_from_file(get_project_root() / "shuffler.py")
        assert not [imp for imp in imports if imp.startswith("services")]

    def test_shuffler_project_imports_are_config_and_domain(self):
        """Settings and domain models are the engine's only in-project dependencies."""
        imports = get_imports_from_file(get_project_root() / "shuffler.py")
        project_imports = {
            imp for imp in imports if imp == "config" or imp.startswith(("domain", "services"))
        }
        assert project_imports == {"config", "domain.models.player", "domain.models.team"}


class TestNoCircularImports:
    """Tests to verify there are no circular import issues."""

    def test_can_import_core_modules(self):
        """Verify core modules can be imported without circular import errors."""
        from domain.models import Player, Team
        from services import Result, TeamGeneratorService
        from shuffler import BalancedShuffler

        assert Player is not None
        assert Team is not None
        assert Result is not None
        assert TeamGeneratorService is not None
        assert BalancedShuffler is not None
