import pytest
from glob import glob
import os


examplesDir = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "Examples")
examplePaths = sorted(glob(os.path.join(examplesDir, "*.py")))


@pytest.fixture(params=examplePaths, ids=os.path.basename)
def examplePath(request):
    return request.param


def test_examples_found():
    assert examplePaths


def test_example(examplePath, capsys):
    with open(examplePath, encoding="utf-8") as f:
        src = f.read()
    exec(compile(src, examplePath, "exec"), {"__name__": "__main__", "__file__": examplePath})
    assert capsys.readouterr().out
