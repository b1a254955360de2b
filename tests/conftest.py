"""Pytest configuration and fixtures."""

import logging
import subprocess
from pathlib import Path

import pytest

from goggles import config_loader
from goggles.collector import FIXED_SOURCE_FILES

SOURCE_CONTENTS = {
    "lib/climate_control.rb": "SOURCE_A_CONTENT",
    "lib/climate_control/environment.rb": "SOURCE_B_CONTENT",
    "lib/climate_control/errors.rb": "SOURCE_C_CONTENT",
    "lib/climate_control/modifier.rb": "SOURCE_D_CONTENT",
    "lib/climate_control/version.rb": "SOURCE_E_CONTENT",
}
MANIFEST_CONTENT = "GEMSPEC_G_CONTENT"
LOC_CONTENT = "| Language | files |\n|:--|--:|\n| Ruby | 5 |"


class FakeTools:
    """Stands in for subprocess.run: answers 'bundle' and 'cloc' invocations."""

    def __init__(self):
        self.calls = []
        self.locations = {}
        self.loc_output = LOC_CONTENT
        self.loc_returncode = 0

    def __call__(self, cmd, **kwargs):
        self.calls.append(list(cmd))
        if cmd[0] == "bundle":
            name = cmd[-1]
            if name in self.locations:
                return subprocess.CompletedProcess(cmd, 0, stdout=f"{self.locations[name]}\n", stderr="")
            return subprocess.CompletedProcess(
                cmd, 7, stdout="", stderr=f"Could not find gem '{name}' in locally installed gems.\n")
        if cmd[0] == "cloc":
            return subprocess.CompletedProcess(cmd, self.loc_returncode, stdout=self.loc_output, stderr="")
        raise FileNotFoundError(cmd[0])


@pytest.fixture(autouse=True)
def reset_state():
    """Clear the tools config cache and restore root logging handlers."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    config_loader.clear_cache()
    yield
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
    for handler in handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(level)
    config_loader.clear_cache()


@pytest.fixture
def fake_tools(monkeypatch) -> FakeTools:
    """Patch the subprocess runner used for external tools."""
    tools = FakeTools()
    monkeypatch.setattr("lib.utils.subprocess.run", tools)
    return tools


def write_package(root: Path, name: str, padded: bool = True) -> Path:
    """Create a package tree with the five fixed files and the gemspec."""
    for rel_path in FIXED_SOURCE_FILES:
        path = root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        content = SOURCE_CONTENTS[rel_path]
        path.write_text(f"\n  {content}\n\n" if padded else content, encoding="utf-8")
    (root / f"{name}.gemspec").write_text(f"{MANIFEST_CONTENT}\n", encoding="utf-8")
    return root


@pytest.fixture
def demo_package(tmp_path, fake_tools) -> Path:
    """A complete 'demo' package, resolvable through the fake 'bundle show'."""
    root = write_package(tmp_path / "demo", "demo")
    fake_tools.locations["demo"] = str(root)
    return root
