import os
import tempfile

# Tests must not pick up the validation override or a user config file,
# so the environment is fixed before abstractable gets imported.
os.environ.pop("ABSTRACTABLE_IGNORE_VALIDATE", None)
os.environ["ABSTRACTABLE_HOME"] = tempfile.mkdtemp()

import pytest  # noqa: E402

from abstractable import config as abstractable_config  # noqa: E402


def pytest_configure(config):
    config.addinivalue_line(
        "markers",
        "ignore_validate: run the test with abstract method validation off",
    )


@pytest.fixture(autouse=True)
def ignore_validate(request):
    marker = request.node.get_closest_marker("ignore_validate")
    original = abstractable_config.ignore_validate()
    if marker:
        abstractable_config.set_ignore_validate(True)
    yield
    abstractable_config.set_ignore_validate(original)
