"""Test configuration and fixtures."""
import io

import pytest
from rich.console import Console

from shtoolset.models.script_model import HeaderContext
from tests.utils.fake_prompter import FakePrompter
from tests.utils.script_files import write_script


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=200, force_terminal=False)


@pytest.fixture
def header(tmp_path):
    return HeaderContext(repo_url="https://example.com/scripts", install_location=tmp_path)


@pytest.fixture
def prompter():
    return FakePrompter()


@pytest.fixture
def script_tree(tmp_path):
    """Create a script root with root-level scripts and nested categories.

    root/
        a.sh b.sh c.sh notes.txt
        system/disk.sh system/update.sh (needs sudo)
        system/nested/deep.sh
        dev_tools/git/prune.sh        (dev_tools itself has no scripts)
        .hidden/secret.sh             (ignored)
    """
    root = tmp_path / "scripts"
    for name in ("b.sh", "a.sh", "c.sh"):
        write_script(root / name, f"#!/bin/bash\n# Root script {name}\necho {name}\n")
    (root / "notes.txt").write_text("not a script\n")
    write_script(root / "system" / "disk.sh", "#!/bin/bash\n# Show disk usage\ndf -h\n")
    write_script(
        root / "system" / "update.sh",
        "#!/bin/bash\n# Update packages\n# needs-sudo: true\napt-get update\n",
    )
    write_script(root / "system" / "nested" / "deep.sh", "#!/bin/bash\n# Deep script\n")
    write_script(root / "dev_tools" / "git" / "prune.sh", "#!/bin/bash\n# Prune branches\n")
    write_script(root / ".hidden" / "secret.sh")
    return root
