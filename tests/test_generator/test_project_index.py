"""Tests for project index-file maintenance."""

from __future__ import annotations

from pathlib import Path

import pytest

from stencil.generator.project_index import (
    module_slug,
    update_api_index,
    update_mock_index,
    update_pages_index,
    update_routes_index,
)


pytestmark = pytest.mark.unit


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


class TestModuleSlug:
    @pytest.mark.parametrize(
        ("module", "expected"),
        [
            ("user-profile", "user-profile"),
            ("UserProfile", "user-profile"),
            ("Orders (v2)", "orders-v2"),
        ],
    )
    def test_slug(self, module: str, expected: str):
        assert module_slug(module) == expected


class TestApiIndex:
    def test_creates_index(self, tmp_path: Path):
        index = tmp_path / "api" / "index.js"
        assert update_api_index(index, "orders") is True
        assert _read(index) == "export { default as orders } from './orders.js';\n"

    def test_appends_to_existing(self, tmp_path: Path):
        index = tmp_path / "index.js"
        index.write_text("export { default as users } from './users.js';\n", encoding="utf-8")
        assert update_api_index(index, "order-item") is True
        assert _read(index).endswith(
            "\nexport { default as orderItem } from './order-item.js';"
        )

    def test_already_present(self, tmp_path: Path):
        index = tmp_path / "index.js"
        update_api_index(index, "orders")
        assert update_api_index(index, "orders") is False


class TestRoutesIndex:
    def test_creates_index(self, tmp_path: Path):
        index = tmp_path / "index.js"
        update_routes_index(index, "orders")
        assert _read(index) == (
            "import { ordersRoutes } from './orders.js';\n\n"
            "export const routes = [\n  ...ordersRoutes\n];\n"
        )

    def test_inserts_after_first_import(self, tmp_path: Path):
        index = tmp_path / "index.js"
        index.write_text(
            "import { homeRoutes } from './home.js';\n\n"
            "export const routes = [\n  ...homeRoutes\n];\n",
            encoding="utf-8",
        )
        assert update_routes_index(index, "orders") is True
        assert _read(index) == (
            "import { homeRoutes } from './home.js';\n"
            "import { ordersRoutes } from './orders.js';\n\n"
            "export const routes = [\n  ...ordersRoutes,\n  ...homeRoutes\n];\n"
        )

    def test_without_routes_array(self, tmp_path: Path):
        index = tmp_path / "index.js"
        index.write_text("// routes\n", encoding="utf-8")
        update_routes_index(index, "orders")
        content = _read(index)
        assert content.startswith("import { ordersRoutes } from './orders.js';\n\n// routes\n")
        assert content.endswith("export const routes = [\n  ...ordersRoutes\n];\n")


class TestMockIndex:
    def test_creates_index(self, tmp_path: Path):
        index = tmp_path / "index.js"
        update_mock_index(index, "orders")
        assert _read(index) == (
            "import { getOrdersApis } from './apis/orders.js';\n\n"
            "export function setupMockServer(server) {\n  getOrdersApis(server);\n}\n"
        )

    def test_registers_in_existing_setup(self, tmp_path: Path):
        index = tmp_path / "index.js"
        index.write_text(
            "import { getUsersApis } from './apis/users.js';\n\n"
            "export function setupMockServer(server) {\n  getUsersApis(server);\n}\n",
            encoding="utf-8",
        )
        assert update_mock_index(index, "orders") is True
        content = _read(index)
        assert "import { getOrdersApis } from './apis/orders.js';\n" in content
        assert "setupMockServer(server) {\n  getOrdersApis(server);\n  getUsersApis(server);" in content

    def test_custom_mock_dir(self, tmp_path: Path):
        index = tmp_path / "index.js"
        update_mock_index(index, "orders", "modules")
        assert "from './modules/orders.js'" in _read(index)
        assert update_mock_index(index, "orders", "modules") is False


class TestPagesIndex:
    def test_appends_export(self, tmp_path: Path):
        index = tmp_path / "index.js"
        index.write_text("export * from './home';", encoding="utf-8")
        assert update_pages_index(index, "orders") is True
        assert _read(index) == "export * from './home';\nexport * from './orders';"
        assert update_pages_index(index, "orders") is False

    def test_missing_index_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            update_pages_index(tmp_path / "index.js", "orders")
