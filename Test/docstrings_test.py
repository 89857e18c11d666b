import doctest
import pytest
import memento
from memento import editor, history, snapshot


@pytest.mark.parametrize("module", [memento, editor, history, snapshot], ids=lambda m: m.__name__)
def test_docstring_examples(module):
    failures, tests = doctest.testmod(module, optionflags=doctest.ELLIPSIS)
    assert tests
    assert not failures
