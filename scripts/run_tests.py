"""
Run the test suite with pytest, mirroring output to tests/latest_results.log.
Extra arguments are passed to pytest (e.g. -k probe).
"""
import sys
import pytest
from pathlib import Path
import datetime

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

TESTS_DIR = PROJECT_ROOT / 'tests'
OUTPUT_FILE = TESTS_DIR / 'latest_results.log'

class Tee:
    """Write-through to several streams (pytest writes to sys.stdout/sys.stderr)."""
    def __init__(self, *streams):
        self.streams = streams

    def write(self, data):
        for stream in self.streams:
            stream.write(data)
            stream.flush()

    def flush(self):
        for stream in self.streams:
            stream.flush()

    def isatty(self):
        return False

def run_tests_with_pytest(extra_args):
    print(f"Running tests via Pytest, output saved to: {OUTPUT_FILE}")

    with open(OUTPUT_FILE, 'w', encoding='utf-8') as log_file:
        log_file.write(f"Test Run: {datetime.datetime.now()}\n")
        log_file.write("=" * 60 + "\n\n")
        log_file.flush()

        original_stdout, original_stderr = sys.stdout, sys.stderr
        sys.stdout = Tee(original_stdout, log_file)
        sys.stderr = Tee(original_stderr, log_file)
        try:
            # -ra: summary of reasons for everything but passes
            exit_code = pytest.main(["-v", "-ra", str(TESTS_DIR)] + list(extra_args))
        finally:
            sys.stdout, sys.stderr = original_stdout, original_stderr

        log_file.write("\n" + "=" * 60 + "\n")
        log_file.write(f"Run Completed. Exit Code: {exit_code}\n")

    return exit_code == 0

if __name__ == "__main__":
    sys.exit(0 if run_tests_with_pytest(sys.argv[1:]) else 1)
