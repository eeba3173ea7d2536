# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""Tests for the command line interface."""

from kerasproxy import __version__
from kerasproxy import runtime
from kerasproxy.cli import main


def test_version(capsys):
    assert main(["--version"]) == 0
    assert f"kerasproxy v{__version__}" in capsys.readouterr().out


def test_help_by_default(capsys):
    assert main([]) == 0
    assert "usage: kerasproxy" in capsys.readouterr().out


def test_info(monkeypatch, capsys):
    monkeypatch.delenv("KERASPROXY_DEPENDENCY", raising=False)
    monkeypatch.setattr(runtime, "installed_version", lambda dependency: None)
    assert main(["--info"]) == 0
    out = capsys.readouterr().out
    assert "Requirement: tensorflow>=2.0" in out
    assert "Installed: no" in out


def test_setup_ready(monkeypatch, capsys):
    seen = {}

    def fake_ready(dependency, min_version, config):
        seen["auto_install"] = config.auto_install
        return True

    monkeypatch.setattr(runtime, "ensure_runtime_ready", fake_ready)
    assert main(["setup"]) == 0
    assert "ready" in capsys.readouterr().out


def test_setup_no_install(monkeypatch, capsys):
    seen = {}

    def fake_ready(dependency, min_version, config):
        seen["auto_install"] = config.auto_install
        return False

    monkeypatch.setattr(runtime, "ensure_runtime_ready", fake_ready)
    assert main(["setup", "--no-install"]) == 1
    assert seen["auto_install"] is False
    assert "not available" in capsys.readouterr().out


def test_setup_bad_config(monkeypatch, capsys):
    monkeypatch.setenv("KERASPROXY_AUTO_INSTALL", "maybe")
    assert main(["setup"]) == 1
    assert "Configuration error" in capsys.readouterr().out
