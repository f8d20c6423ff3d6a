# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Message catalogue lookup for user-visible labels and error text.

Copyright 2025 DNAi inc.
"""

import gettext
from pathlib import Path

LOCALE_DIR = Path(__file__).parent / "locale"

_translation = gettext.translation("imgmd", localedir=LOCALE_DIR, fallback=True)


def localize(key: str) -> str:
    """
    Translate a message key into the active locale.

    Args:
        key: English message text used as the catalogue key

    Returns:
        The translated text, or the key itself when no catalogue is installed
    """
    return _translation.gettext(key)
