from types import SimpleNamespace

import pytest

from notifysendall import privilege
from notifysendall.config import Settings


def test_root_skips_validation(monkeypatch):
    monkeypatch.setattr(privilege.os, "geteuid", lambda: 0)

    def fail(*args, **kwargs):
        raise AssertionError("sudo must not run for root")

    monkeypatch.setattr(privilege.subprocess, "run", fail)
    privilege.ensure_privilege(Settings())


def test_missing_sudo_is_fatal(monkeypatch):
    monkeypatch.setattr(privilege.os, "geteuid", lambda: 1000)
    monkeypatch.setattr(privilege.shutil, "which", lambda name: None)
    with pytest.raises(privilege.PrivilegeError, match="not found"):
        privilege.ensure_privilege(Settings())


def test_validates_once_with_sudo_v(monkeypatch):
    calls = []
    monkeypatch.setattr(privilege.os, "geteuid", lambda: 1000)
    monkeypatch.setattr(privilege.shutil, "which", lambda name: "/usr/bin/sudo")

    def run(args, **kwargs):
        calls.append(args)
        return SimpleNamespace(returncode=0, stderr="")

    monkeypatch.setattr(privilege.subprocess, "run", run)
    privilege.ensure_privilege(Settings())
    assert calls == [["sudo", "-v"]]


def test_rejected_credentials_are_fatal(monkeypatch):
    monkeypatch.setattr(privilege.os, "geteuid", lambda: 1000)
    monkeypatch.setattr(privilege.shutil, "which", lambda name: "/usr/bin/sudo")
    monkeypatch.setattr(
        privilege.subprocess,
        "run",
        lambda args, **kwargs: SimpleNamespace(returncode=1, stderr="sudo: 3 incorrect password attempts\n"),
    )
    with pytest.raises(privilege.PrivilegeError, match="incorrect password"):
        privilege.ensure_privilege(Settings())


def test_as_user_wraps_command():
    command = privilege.as_user(Settings(), "andy", ["notify-send", "hi"])
    assert command == ["sudo", "-u", "andy", "--", "notify-send", "hi"]


def test_custom_elevation_command_is_used(monkeypatch):
    calls = []
    monkeypatch.setattr(privilege.os, "geteuid", lambda: 1000)
    monkeypatch.setattr(privilege.shutil, "which", lambda name: name)

    def run(args, **kwargs):
        calls.append(args)
        return SimpleNamespace(returncode=0, stderr="")

    monkeypatch.setattr(privilege.subprocess, "run", run)
    settings = Settings(sudo="/usr/local/bin/sudo")
    privilege.ensure_privilege(settings)

    assert calls == [["/usr/local/bin/sudo", "-v"]]
    assert privilege.as_user(settings, "andy", ["true"])[:4] == ["/usr/local/bin/sudo", "-u", "andy", "--"]
