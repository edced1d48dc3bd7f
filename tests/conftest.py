"""
Test fixtures shared across all noglobals tests.
"""

from pathlib import Path

import pytest

TESTDATA = Path(__file__).parent / "testdata"


@pytest.fixture
def fixture_go_path():
    """Path to the Go file covering every allow/report combination."""
    return str(TESTDATA / "code" / "code.go")


@pytest.fixture
def clean_go_code():
    """Go code with no global variables that should be reported."""
    return '''package clean

import "errors"

var ErrNotFound = errors.New("not found")

const limit = 10

func add(a, b int) int {
	total := a + b
	return total
}
'''


@pytest.fixture
def dirty_go_code():
    """Go code with exactly one reported global."""
    return '''package dirty

var counter = 0
'''


@pytest.fixture
def go_tree(tmp_path, clean_go_code, dirty_go_code):
    """
    A small source tree:

        root/a.go          one global (counter)
        root/a_test.go     one global (fixture)
        root/b.go          clean
        root/notes.txt     not Go
        root/sub/c.go      one global (cache)
    """
    root = tmp_path / "root"
    sub = root / "sub"
    sub.mkdir(parents=True)
    (root / "a.go").write_text(dirty_go_code)
    (root / "a_test.go").write_text('package dirty\n\nvar fixture = []string{"x"}\n')
    (root / "b.go").write_text(clean_go_code)
    (root / "notes.txt").write_text("var notGo = 1\n")
    (sub / "c.go").write_text("package sub\n\nvar cache = map[string]int{}\n")
    return root
