# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Chain Demo: ordered validation, coercion and short-circuiting.

Run with:
    python examples/chain_demo.py
"""

from okey import ValidatorChain
from okey.exceptions import ConfigurationError


def demo_break_on_error():
    """Show how break_on_error controls how many errors accumulate."""
    print("\n" + "=" * 70)
    print("DEMO 1: Short-circuit vs. run-everything")
    print("=" * 70)

    for break_on_error in (True, False):
        chain = ValidatorChain({"required": {}, "integer": {}}, break_on_error=break_on_error)
        chain.validate(None)
        print(f"\n  break_on_error={break_on_error}")
        print(f"    has_error: {chain.has_error}")
        print(f"    errors:    {chain.errors}")


def demo_coercion():
    """Show how each validator hands a coerced value to the next one."""
    print("\n" + "=" * 70)
    print("DEMO 2: Coercion order")
    print("=" * 70)

    configs = [
        {"integer": {}, "range": {"start": 1, "end": 5}},
        {"range": {"start": 1, "end": 5}, "integer": {}},
    ]
    for config in configs:
        chain = ValidatorChain(config)
        value = chain.validate("4")
        print(f"\n  {list(config)} -> {value!r} ({type(value).__name__})")


def demo_configuration_errors():
    """Show how misconfigured chains are rejected before any value is validated."""
    print("\n" + "=" * 70)
    print("DEMO 3: Configuration errors")
    print("=" * 70)

    for config in ({"maximum": {}}, {"range": {"start": 1}}):
        try:
            ValidatorChain(config)
            print(f"\n  {config}: FAIL - chain built (should have been rejected)")
        except ConfigurationError as e:
            print(f"\n  {config}: rejected")
            print(f"    {e}")


if __name__ == "__main__":
    demo_break_on_error()
    demo_coercion()
    demo_configuration_errors()
