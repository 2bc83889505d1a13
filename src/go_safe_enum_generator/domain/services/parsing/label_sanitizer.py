#!/usr/bin/env python3

"""Conversion of free-form enum labels into Go identifier fragments.

The label itself stays the runtime value of the member; only the name of the
generated Go variable is derived here. The conversion is lossy: casing inside
non-leading words is normalised, so ``digest-MD5`` and ``digest-md5`` map to
the same fragment.
"""

import re

WORD_SEPARATORS = re.compile(r"[-_ ]")
NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9]+")


def sanitize_label(label: str) -> str:
    """Turn a label into a valid, non-empty Go identifier fragment.

    Args:
        label: Value label as written in the ENUM declaration

    Returns:
        Identifier fragment that never starts with a digit

    Examples:
        - ``digest-md5`` -> ``digestMd5``
        - ``404-not-found`` -> ``_404NotFound``
        - ``!!!`` -> ``_``
    """
    words = WORD_SEPARATORS.split(label)

    for i, word in enumerate(words):
        word = NON_ALPHANUMERIC.sub("", word)
        # The leading word keeps its case; the enum name prefix capitalises it later
        if i > 0 and word:
            word = word[0].upper() + word[1:].lower()
        words[i] = word

    safe = "".join(words)

    if not safe or safe[0].isdigit():
        safe = "_" + safe

    return safe
