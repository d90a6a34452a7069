import os
import sys

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if REPO_ROOT not in sys.path:
	sys.path.insert(0, REPO_ROOT)

from evaluation.evaluation import parse_pytest_verbose_output


def test_parse_pytest_verbose_output():
	output = "\n".join([
		"============ test session starts ============",
		"tests/test_core.py::test_abcde_exact_codes PASSED                 [ 10%]",
		"tests/test_core.py::test_empty_input[freqs0] FAILED               [ 20%]",
		"tests/test_service.py::test_render_report SKIPPED (no reason)      [ 30%]",
		"tests/test_service.py::test_main_prints_demo_report ERROR          [ 40%]",
		"1 passed, 1 failed",
	])
	tests = parse_pytest_verbose_output(output)
	assert [(t["name"], t["outcome"]) for t in tests] == [
		("test_abcde_exact_codes", "passed"),
		("test_empty_input[freqs0]", "failed"),
		("test_render_report", "skipped"),
		("test_main_prints_demo_report", "error"),
	]
	assert tests[0]["nodeid"] == "tests/test_core.py::test_abcde_exact_codes"


def test_parse_ignores_unrelated_lines():
	assert parse_pytest_verbose_output("collected 3 items\n\n") == []


def test_environment_info_keys():
	from evaluation.evaluation import get_environment_info
	assert set(get_environment_info()) == {"python_version", "platform"}
