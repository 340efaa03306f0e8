#!/usr/bin/env python3
"""Theme editing example.

Reads and rewrites a nested theme record with path lenses, then reshapes a
list of font sizes with a traversal and collect.

Run with ``--debug`` to see chains being composed.
"""

from __future__ import annotations

import logging
import sys

from opticks import collect, optic, over, path, set_, to_list, values, view

theme = {
    "styles": {
        "CodeSurfer": {
            "code": {"fontFamily": "monospaced"},
        },
    },
    "sizes": [
        {"name": "body", "px": 14},
        {"name": "title", "px": 24},
    ],
}


def main() -> None:
    font = path(["styles", "CodeSurfer", "code", "fontFamily"])
    print("font:", view(font, theme))

    upgraded = set_(font, "Fira Code", theme)
    print("upgraded font:", view(font, upgraded))
    print("original untouched:", view(font, theme))

    # Missing records are created on write.
    accent = optic("styles", "CodeSurfer", "accent", "color")
    print("accent:", view(accent, set_(accent, "tomato", theme)))

    sizes = optic("sizes", values, collect({"name": "name", "px": "px"}))
    labels = optic(sizes, lambda size: f"{size['name']}={size['px']}px")
    print("sizes:", to_list(labels, theme))

    bigger = over(sizes, lambda size: {**size, "px": size["px"] + 2}, theme)
    print("bigger:", to_list(labels, bigger))


if __name__ == "__main__":
    if "--debug" in sys.argv:
        logging.basicConfig(level=logging.DEBUG)
    main()
