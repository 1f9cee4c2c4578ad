"""Tests for the CLI runner, the Hydra entry point and device resolution."""

import logging

import pytest
import torch
from hydra import compose, initialize
from omegaconf import OmegaConf

from core.device import resolve_device
from log import get_logger
from main import main, run


@pytest.fixture
def cfg():
    """The shipped ``conf/config.yaml`` with a small signature."""
    with initialize(version_base=None, config_path="../conf"):
        return compose(config_name="config", overrides=["p=1", "q=2"])


def test_config_keys(cfg):
    assert cfg.normalization == "commutator"
    assert cfg.odd_only is False
    assert cfg.device == "cpu"
    assert cfg.print_matrices is False


def test_run_builds_collection():
    cfg = OmegaConf.create({"p": 2, "q": 1})
    group = run(cfg)
    assert len(group) == 8
    assert group.normalization == "commutator"


def test_run_from_composed_config(cfg):
    group = run(cfg)
    assert len(group) == 8
    assert group.signature.p == 1 and group.signature.q == 2


def test_run_prints_matrices(capsys):
    cfg = OmegaConf.create({
        "p": 1, "q": 1, "odd_only": True, "print_matrices": True, "precision": 2,
    })
    group = run(cfg)
    out = capsys.readouterr().out
    assert len(group) == 2
    assert " Gamma 1: indices 0, type H" in out
    assert " Gamma 2: indices 1, type L" in out
    assert "(+0.00" in out


def test_hydra_main_with_overrides(capsys):
    with initialize(version_base=None, config_path="../conf"):
        cfg = compose(
            config_name="config",
            overrides=["p=1", "q=1", "odd_only=true", "print_matrices=true"],
        )
    main(cfg)
    out = capsys.readouterr().out
    assert " Gamma 2: indices 1, type L" in out
    assert " Gamma 3:" not in out


def test_resolve_device_passthrough():
    assert resolve_device("cpu") == "cpu"
    assert resolve_device("cuda:1") == "cuda:1"


def test_resolve_device_auto(monkeypatch):
    monkeypatch.setattr(torch.cuda, "is_available", lambda: False)
    assert resolve_device("auto") == "cpu"
    monkeypatch.setattr(torch.cuda, "is_available", lambda: True)
    assert resolve_device("auto") == "cuda"


def test_logger_hierarchy():
    logger = get_logger("core.odd_group")
    assert logger.name == "oddgamma.core.odd_group"
    root = logging.getLogger("oddgamma")
    assert len(root.handlers) == 1
    get_logger("again")
    assert len(root.handlers) == 1
