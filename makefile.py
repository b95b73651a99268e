#!/usr/bin/env python3
"""
makefile.py - Task runner for Foodie Express.

Usage:
    python makefile.py <target>

Requires: pip install -e .[dev]   (pytest and colorama)
"""

import shutil
import subprocess
import sys
from collections import defaultdict
from pathlib import Path

from colorama import Fore, Style
from colorama import init as colorama_init

colorama_init(autoreset=True)

ROOT = Path(__file__).resolve().parent


def print_header(title):
    bar = Fore.CYAN + Style.BRIGHT + "=" * 52 + Style.RESET_ALL
    label = Fore.CYAN + Style.BRIGHT + f"  {title}" + Style.RESET_ALL
    print(f"\n{bar}\n{label}\n{bar}")


def print_step(msg):
    print(f"{Fore.YELLOW}-->{Style.RESET_ALL} {msg}")


def print_success(msg):
    print(f"{Fore.GREEN}[OK]{Style.RESET_ALL} {msg}")


def run_cmd(args, allow_failure=False):
    """
    Run a command as a subprocess, streaming output directly to the terminal.
    Exits with the subprocess exit code on failure unless allow_failure=True.
    """
    try:
        result = subprocess.run(args, cwd=ROOT)
    except FileNotFoundError:
        print(f"{Fore.RED}[ERROR]{Style.RESET_ALL} Command not found: '{args[0]}'")
        if not allow_failure:
            sys.exit(127)
        return 127
    if result.returncode != 0 and not allow_failure:
        sys.exit(result.returncode)
    return result.returncode


def pytest(*paths):
    run_cmd([sys.executable, "-m", "pytest", "-v", *paths])


def target_test():
    print_header("Running All Tests")
    pytest("tests")


def target_test_catalog():
    print_header("Running Catalog Tests")
    pytest("tests/test_catalog", "tests/test_query")


def target_test_orders():
    print_header("Running Order Queue Tests")
    pytest("tests/test_orders")


def target_test_shell():
    print_header("Running Shell Tests")
    pytest("tests/test_shell", "tests/test_main.py")


def target_run():
    print_header("Running Foodie Express")
    run_cmd([sys.executable, "-m", "foodie", *sys.argv[2:]])


def target_demo():
    print_header("Running Menu Walk-through")
    run_cmd([sys.executable, "examples/menu_example.py"])


def target_clean():
    print_header("Cleaning Caches")
    for path in [ROOT / ".pytest_cache", *ROOT.rglob("__pycache__")]:
        if path.exists():
            shutil.rmtree(path)
            print_step(f"Removed {path.relative_to(ROOT)}")
    print_success("Clean")


def target_help():
    title = (
        Fore.CYAN
        + Style.BRIGHT
        + "Foodie Express - Available Commands"
        + Style.RESET_ALL
    )
    print(f"\n{title}\n")
    groups = defaultdict(list)
    for name, (_, desc, group) in TARGETS.items():
        groups[group].append((name, desc))
    for group in ["Testing", "Run", "Tools", "Meta"]:
        if group not in groups:
            continue
        print(Fore.YELLOW + Style.BRIGHT + f"{group}:" + Style.RESET_ALL)
        for name, desc in groups[group]:
            print(f"  {Fore.GREEN}{name.ljust(16)}{Style.RESET_ALL}  {desc}")
        print()


TARGETS = {
    "test": (target_test, "Run all tests", "Testing"),
    "test-catalog": (target_test_catalog, "Run catalog and scan tests", "Testing"),
    "test-orders": (target_test_orders, "Run order queue tests", "Testing"),
    "test-shell": (target_test_shell, "Run system, console and CLI tests", "Testing"),
    "run": (target_run, "Start the interactive shell (extra args are passed on)", "Run"),
    "demo": (target_demo, "Run the scripted menu walk-through", "Run"),
    "clean": (target_clean, "Remove pytest and bytecode caches", "Tools"),
    "help": (target_help, "Show this help message", "Meta"),
}


def main():
    if len(sys.argv) < 2:
        target_help()
        sys.exit(0)

    name = sys.argv[1]

    if name not in TARGETS:
        print(f"{Fore.RED}[ERROR]{Style.RESET_ALL} Unknown target: '{name}'")
        print("  Run:  python makefile.py help  to list all available targets.")
        sys.exit(1)

    func, _, _ = TARGETS[name]
    func()


if __name__ == "__main__":
    main()
