import io

import pytest

from bill_manager.console import Console


@pytest.fixture
def make_console():
    """Build a Console fed from the given input lines, plus its stdout buffer."""
    def _make(*lines, audit_logger=None):
        stdin = io.StringIO("".join(f"{line}\n" for line in lines))
        stdout = io.StringIO()
        return Console(stdin, stdout, audit_logger=audit_logger), stdout
    return _make
