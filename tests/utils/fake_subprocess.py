"""Test helper: fake subprocess runner.

FakeSubprocess is a callable with the same call shape as subprocess.run.
Rules match a substring of the joined command; every call is recorded.

    fake = FakeSubprocess()
    fake.when("sudo -v").then_exit(1)
    fake.when("broken.sh").then_raise(FileNotFoundError("bash"))
    executor = ScriptExecutor(prompter, runner=fake)
"""
from __future__ import annotations

import subprocess
from typing import Callable, List, Tuple


def make_completed_process(cmd, returncode: int = 0):
    return subprocess.CompletedProcess(cmd, returncode)


class FakeSubprocess:
    def __init__(self):
        self._rules: List[Tuple[str, Callable]] = []
        self.calls: List[List[str]] = []

    def when(self, cmd_substring: str):
        parent = self

        class _Then:
            def then_exit(self, returncode: int):
                parent._rules.append((cmd_substring, lambda cmd: make_completed_process(cmd, returncode)))
                return parent

            def then_raise(self, exc: BaseException):
                def factory(cmd):
                    raise exc

                parent._rules.append((cmd_substring, factory))
                return parent

        return _Then()

    def __call__(self, cmd, **kwargs):
        self.calls.append(list(cmd))
        joined = " ".join(cmd) if isinstance(cmd, (list, tuple)) else str(cmd)
        for substr, factory in self._rules:
            if substr in joined:
                return factory(cmd)
        # default: successful exit
        return make_completed_process(cmd, 0)

    def joined_calls(self):
        return [" ".join(c) for c in self.calls]
