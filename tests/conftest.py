import subprocess

import pytest

from provbuild.settings import Settings


@pytest.fixture
def settings(tmp_path):
    root = tmp_path / 'examples' / '.terraform' / 'providers' / 'registry.terraform.io' / 'ashleyjackson' / 'instatus' / '1.0.0'
    return Settings(registry_root=str(root), artifact='terraform-provider-instatus', go='go', cli_config=None)


class RunRecorder:

    def __init__(self, returncode=0):
        self.returncode = returncode
        self.calls = []

    def __call__(self, cmd, **kwargs):
        self.calls.append((cmd, kwargs))
        if kwargs.get('check') and self.returncode != 0:
            raise subprocess.CalledProcessError(self.returncode, cmd)
        return subprocess.CompletedProcess(cmd, self.returncode)


@pytest.fixture
def fake_run(monkeypatch):
    recorder = RunRecorder()
    monkeypatch.setattr(subprocess, 'run', recorder)
    return recorder
