#!/usr/bin/env python3
"""
Example usage of prettyjson.

This script shows the default colored output, a custom style, disabled
colors and single-line output for the same value.
"""

import prettyjson
from prettyjson import Formatter, FormatterConfig, Style


def main():
    """Main example function."""
    sample_data = {
        "str": "foo",
        "num": 100,
        "bool": False,
        "null": None,
        "array": ["foo", "bar", "baz"],
        "map": {"foo": "bar"},
    }

    print("Default formatting")
    print("=" * 50)
    print(prettyjson.marshal(sample_data))
    print(prettyjson.format(b'{"foo":"bar"}'))

    print("\nCustom style")
    print("=" * 50)
    config = FormatterConfig(
        indent=4,
        key_color=Style("magenta"),
        bool_color=None,
        null_color=Style(attrs=("underline",)),
    )
    print(Formatter(config).marshal(sample_data))

    print("\nColors disabled")
    print("=" * 50)
    print(Formatter(FormatterConfig.plain()).marshal(sample_data))

    print("\nOne line")
    print("=" * 50)
    print(Formatter(FormatterConfig.compact()).marshal(sample_data))


if __name__ == "__main__":
    main()
