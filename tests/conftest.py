" generic fixtures "
import importlib
import itertools
import textwrap
from pathlib import Path

import pytest

from plugcli.settings import Settings

SAMPLE_EXTENSION = Path(__file__).parent.parent / "sample_extension"

_namespace_ids = itertools.count()


def pytest_configure():
    "Runs once before all"
    from plugcli.logging_setup import init_logger

    init_logger("/dev/null", force_debug=True)


def command_source(doc: str = "Do something.", result: str = "'ok'") -> str:
    "Source of a command module whose run/help return a marker and the args"
    return f'''
from plugcli.commands.interface import Command


class Extension(Command):
    """{doc}"""

    def run(self, *args):
        return ({result}, args)

    def help(self, *args):
        return ("help", args)
'''


@pytest.fixture
def settings():
    "Settings with an empty environment"
    return Settings()


@pytest.fixture
def sample_extension(monkeypatch):
    "Makes the sample command package importable"
    monkeypatch.syspath_prepend(str(SAMPLE_EXTENSION))
    yield "plugcli_examples"


@pytest.fixture
def make_namespace(tmp_path, monkeypatch):
    "Returns a factory writing a uniquely named command package"
    monkeypatch.syspath_prepend(str(tmp_path))

    def _make(modules: dict[str, str], init: str = "") -> str:
        package = f"plugcli_test_ns{next(_namespace_ids)}"
        package_dir = tmp_path / package
        package_dir.mkdir()
        (package_dir / "__init__.py").write_text(textwrap.dedent(init))
        for name, source in modules.items():
            (package_dir / f"{name}.py").write_text(textwrap.dedent(source))
        importlib.invalidate_caches()
        return package

    return _make
