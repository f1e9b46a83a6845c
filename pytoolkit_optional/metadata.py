import tomllib
from importlib import metadata as importlib_metadata
from pathlib import Path
from typing import cast

from typing_extensions import NotRequired, ReadOnly, Required, TypedDict

PYPROJECT_PATH = Path(__file__).parent.parent / "pyproject.toml"
DISTRIBUTION_NAME = "pytoolkit-optional"


class ProjectInfo(TypedDict):
    """[project]セクションの型定義"""

    name: ReadOnly[Required[str]]
    version: ReadOnly[NotRequired[str]]
    description: ReadOnly[NotRequired[str]]
    requires_python: ReadOnly[NotRequired[str]]
    license: ReadOnly[NotRequired[str | dict[str, str]]]
    authors: ReadOnly[NotRequired[list[dict[str, str]]]]
    keywords: ReadOnly[NotRequired[list[str]]]
    classifiers: ReadOnly[NotRequired[list[str]]]
    dependencies: ReadOnly[NotRequired[list[str]]]
    optional_dependencies: ReadOnly[NotRequired[dict[str, list[str]]]]


class ProjectUrls(TypedDict):
    """[project.urls]セクションの型定義"""

    homepage: ReadOnly[NotRequired[str]]
    documentation: ReadOnly[NotRequired[str]]
    repository: ReadOnly[NotRequired[str]]
    changelog: ReadOnly[NotRequired[str]]
    bug_tracker: ReadOnly[NotRequired[str]]


class PyProjectToml(TypedDict, total=False):
    """pyproject.toml全体の型定義

    https://peps.python.org/pep-0621/
    """

    project: ReadOnly[Required[ProjectInfo]]
    urls: ReadOnly[NotRequired[ProjectUrls]]


def load_pyproject(path: Path = PYPROJECT_PATH) -> PyProjectToml | None:
    """Return the parsed pyproject.toml if it belongs to this package."""
    if not path.is_file():
        return None
    with path.open("rb") as f:
        pyproject = cast(PyProjectToml, tomllib.load(f))
    project = pyproject.get("project")
    if project is None or project.get("name") != DISTRIBUTION_NAME:
        return None
    return pyproject


def load_installed_metadata() -> PyProjectToml:
    """Return the metadata of the installed distribution."""
    try:
        version = importlib_metadata.version(DISTRIBUTION_NAME)
    except importlib_metadata.PackageNotFoundError:
        return {"project": {"name": DISTRIBUTION_NAME}}
    return {"project": {"name": DISTRIBUTION_NAME, "version": version}}


def get_package_metadata() -> PyProjectToml:
    """Return the package metadata."""
    pyproject = load_pyproject()
    if pyproject is not None:
        return pyproject
    return load_installed_metadata()


METADATA = get_package_metadata()
NAME = METADATA["project"]["name"]
VERSION = METADATA["project"].get("version", "unknown")
