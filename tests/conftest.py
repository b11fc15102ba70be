# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import io
import random
import time
from typing import Iterable, List, Optional

import pytest
from rich.console import Console
from typer.testing import CliRunner

from repo_credits.repo import Contributor, RepoInfo
from repo_credits.ui.card import Card


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch, tmp_path):
    """
    Keep the developer's own config file and REPO_CREDITS_* variables
    out of the tests.
    """
    import os

    for key in list(os.environ):
        if key.startswith("REPO_CREDITS_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("REPO_CREDITS_CONFIG", str(tmp_path / "no-such-config.toml"))
    yield


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture()
def hello_card() -> Card:
    """40x10 screen with one centered five-letter row."""
    return Card.compose(["HELLO"], 40, 10)


@pytest.fixture()
def sample_info() -> RepoInfo:
    return RepoInfo(
        name="demo",
        description="A tiny demo project",
        total_commits=42,
        contributors=[
            Contributor("Ada Lovelace", 30),
            Contributor("Grace Hopper", 8),
            Contributor("Alan Turing", 4),
        ],
        highlights=["add rain theme", "handle empty repositories"],
        stars=7,
        license="MIT License",
        language="Python",
    )


@pytest.fixture()
def null_console() -> Console:
    return Console(file=io.StringIO(), width=40, height=10)


@pytest.fixture()
def tty_console() -> Console:
    return Console(file=io.StringIO(), width=40, height=10, force_terminal=True)


class ScriptedKeys:
    """Key source that replays a fixed script; None means "no key before the tick"."""

    def __init__(self, script: Iterable[Optional[str]] = ()) -> None:
        self.script: List[Optional[str]] = list(script)
        self.polls = 0

    def poll(self, timeout: float) -> Optional[str]:
        self.polls += 1
        key = self.script.pop(0) if self.script else None
        if key is None and timeout > 0:
            # Behave like an idle terminal: nothing arrives before the tick
            time.sleep(timeout)
        return key


@pytest.fixture()
def scripted_keys():
    return ScriptedKeys
