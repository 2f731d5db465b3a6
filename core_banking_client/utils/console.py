"""Decorative console output for the demo transcript"""

SEPARATOR = "=" * 42


def print_section(title: str) -> None:
    print()
    print(SEPARATOR)
    print(title)
    print(SEPARATOR)


def print_test(name: str) -> None:
    print()
    print(f"--- {name} ---")


def log(message: str) -> None:
    print(message)


def log_empty() -> None:
    print()
