#!/usr/bin/env python3
"""
Help Demo - indicator documentation lookups

Shows the different shapes ``tai_app.help`` returns. Nothing here needs the
TA-Lib C library or network access.

Run: python examples/help_demo.py
"""

import tai_app
from tai_app.config import ConfigLoader
from tai_app.docs import Category
from tai_app.errors import UnknownIndicatorError
from tai_app.logging import configure_logging


def main():
    """Run the help demo."""
    configure_logging(**ConfigLoader.create().load()["logging"])
    print("TAI App - Help Demo")
    print("=" * 50)

    print("\nSingle indicator:")
    print(tai_app.help("rsi"))

    print("\nAs a parsed URI:")
    uri = tai_app.help("bbands", format="uri")
    print(f"  host={uri.netloc} path={uri.path}")

    print("\nAs a dict:")
    print(f"  {tai_app.help('macd', format='hash')}")

    print("\nBy category:")
    for category in Category:
        urls = tai_app.help(category=category)
        print(f"  {category.label:<22} {len(urls):>3} indicators")

    print("\nSearch for 'moving average':")
    for key, url in tai_app.help(search="moving average").items():
        print(f"  {key:<8} {url}")

    print(f"\nAll indicators: {len(tai_app.help('all'))}")

    try:
        tai_app.help("not_an_indicator")
    except UnknownIndicatorError as e:
        print(f"\nUnknown keys raise: {e}")

    print("\nHelp demo completed!")


if __name__ == "__main__":
    main()
