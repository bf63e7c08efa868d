"""
Build script for htmlfunc with optional mypyc compilation.

Usage:
    # Pure Python build (default)
    python -m build

    # Compiled with mypyc
    HTMLFUNC_USE_MYPYC=1 pip install .
"""

import os
import sys
from pathlib import Path

from setuptools import setup

USE_MYPYC = os.environ.get("HTMLFUNC_USE_MYPYC", "0") == "1"

# Hot path of every query: tag scanning, depth tracking, attribute lookup.
# finders.py and selector.py stay interpreted; they only build patterns and
# dispatch, and lru_cache-wrapped helpers gain nothing from compilation.
MYPYC_MODULES = [
    "src/htmlfunc/scanner.py",
    "src/htmlfunc/extract.py",
    "src/htmlfunc/attrs.py",
]


def build_with_mypyc() -> list:
    """Build extension modules using mypyc."""
    try:
        from mypyc.build import mypycify
    except ImportError:
        print(
            "ERROR: mypyc is not installed. Install with: pip install mypy",
            file=sys.stderr,
        )
        print("Or install with mypyc support: pip install htmlfunc[mypyc]", file=sys.stderr)
        sys.exit(1)

    for module_path in MYPYC_MODULES:
        if not Path(module_path).exists():
            print(f"ERROR: Module not found: {module_path}", file=sys.stderr)
            sys.exit(1)

    print("=" * 70)
    print("Building htmlfunc with mypyc compilation")
    print("=" * 70)
    print(f"Compiling {len(MYPYC_MODULES)} modules:")
    for module in MYPYC_MODULES:
        print(f"  - {module}")
    print("=" * 70)

    opt_level = os.environ.get("MYPYC_OPT_LEVEL", "3")
    debug_level = os.environ.get("MYPYC_DEBUG_LEVEL", "0")

    mypyc_options = {
        "opt_level": opt_level,
        "debug_level": debug_level,
        "verbose": True,
        "separate": False,
        "multi_file": False,
    }

    return mypycify(MYPYC_MODULES, **mypyc_options)


ext_modules = []

if USE_MYPYC:
    ext_modules = build_with_mypyc()

setup(
    ext_modules=ext_modules,
)
