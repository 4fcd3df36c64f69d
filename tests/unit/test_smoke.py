"""Smoke tests: interpreter version, installed stack, package metadata."""

import importlib
import sys

import pytest


def _major(version: str) -> int:
    return int(version.split(".")[0])


def test_interpreter_is_311_or_newer() -> None:
    # asyncio.wait_for raises the builtin TimeoutError from 3.11 on
    assert sys.version_info >= (3, 11)


@pytest.mark.parametrize(
    "module_name",
    [
        "fastapi",
        "starlette",
        "uvicorn",
        "asyncpg",
        "structlog",
        "prometheus_client",
        "httpx",
    ],
)
def test_runtime_dependency_importable(module_name: str) -> None:
    assert importlib.import_module(module_name) is not None


def test_pydantic_is_v2() -> None:
    import pydantic

    assert _major(pydantic.VERSION) >= 2


def test_sqlalchemy_is_2x_with_asyncio_extension() -> None:
    import sqlalchemy
    from sqlalchemy.ext.asyncio import async_sessionmaker

    assert _major(sqlalchemy.__version__) >= 2
    assert callable(async_sessionmaker)


def test_package_exposes_semver(project_version: str) -> None:
    major, minor, *_ = project_version.split(".")
    assert major.isdigit() and minor.isdigit()


def test_app_factory_builds_without_environment() -> None:
    from postservice.api.main import create_app
    from postservice.config.service_config import TEST_SERVICE_CONFIG

    app = create_app(TEST_SERVICE_CONFIG)

    assert app.title == "Post Service API"
