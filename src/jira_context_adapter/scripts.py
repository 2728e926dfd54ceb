import subprocess
import sys


def test():
    """Run tests using pytest."""
    sys.exit(subprocess.call(["pytest", "tests"]))

def lint():
    """Run linting checks."""
    print("Running ruff check...")
    rc = subprocess.call(["ruff", "check", "src", "tests"])
    if rc != 0:
        sys.exit(rc)

    print("Running ruff format --check...")
    sys.exit(subprocess.call(["ruff", "format", "--check", "src", "tests"]))

def format():
    """Run formatter."""
    print("Running ruff format...")
    sys.exit(subprocess.call(["ruff", "format", "src", "tests"]))
