"""Pytest configuration and shared fixtures.

Small hand-built networks whose shortest paths and recommendation
rankings are known in advance.
"""

from pathlib import Path

import pytest

from socialnet.core.network import SocialNetwork


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory so user config never leaks in."""
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def chain_network() -> SocialNetwork:
    """Alice - Bob - Carol - Dave, a simple chain."""
    return SocialNetwork.from_pairs(
        ["Alice", "Bob", "Carol", "Dave"],
        [("Alice", "Bob"), ("Bob", "Carol"), ("Carol", "Dave")],
    )


@pytest.fixture
def recommendation_network() -> SocialNetwork:
    """P with friends F1..F3 and non-friends Q1 (3 mutual), Q2 (1), Q3 (0).

    Q3 is connected only to Q1, so it shares no friends with P.
    """
    return SocialNetwork.from_pairs(
        ["P", "F1", "F2", "F3", "Q3", "Q2", "Q1"],
        [
            ("P", "F1"),
            ("P", "F2"),
            ("P", "F3"),
            ("Q1", "F1"),
            ("Q1", "F2"),
            ("Q1", "F3"),
            ("Q2", "F2"),
            ("Q3", "Q1"),
        ],
    )


@pytest.fixture
def diamond_network() -> SocialNetwork:
    """Two equally short routes from A to D: via B (added first) and via C."""
    return SocialNetwork.from_pairs(
        ["A", "B", "C", "D"],
        [("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")],
    )


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Path for a config file inside a temporary directory."""
    return tmp_path / "socialnet" / "config.toml"
