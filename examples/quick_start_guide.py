#!/usr/bin/env python3
"""
Quick Start Guide for rez.

Walks through stringification, concatenation, HTML escaping and the host
registration table.
"""

from rez import RezConfig, concat, escape_html, load_modules, stringify


class Price:
    """Value that supplies its own text through the render hook."""

    def __init__(self, amount, currency):
        self.amount = amount
        self.currency = currency

    def __render__(self):
        return f"{self.amount:.2f} {self.currency}"


def quick_start_example():
    """Quick start example showing basic usage."""

    print("QUICK START - rez")
    print("=" * 45)

    print("\nStep 1: Stringify")
    print("-" * 30)
    for value in [None, True, 42, 0.1 + 0.2, "text", Price(19.9, "USD"), [1, 2]]:
        print(f"{value!r:>28} -> {stringify(value)}")

    print("\nStep 2: Concatenate")
    print("-" * 30)
    print(concat(["total", "=", Price(5, "EUR"), "; paid=", False]))
    print(repr(concat({1: "a", 2: "b", 4: "d"})), "(stops at the first gap)")

    print("\nStep 3: Escape")
    print("-" * 30)
    print(escape_html("<a href='x'>Tom & \"Jerry\"</a>"))
    print(escape_html(), "(no argument)")

    print("\nStep 4: Host registration")
    print("-" * 30)
    modules = load_modules(RezConfig.strict())
    print(modules["concat"](["a", None, "b"]), "(strict stops at None)")
    print(modules["escape"]["html"]("1 < 2"))


if __name__ == "__main__":
    quick_start_example()
