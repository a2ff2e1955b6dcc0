import pytest

from predicates.rules import reset_rules


@pytest.fixture(autouse=True)
def clean_rules():
    """Each test starts from an unloaded rules cache."""
    reset_rules()
    yield
    reset_rules()
