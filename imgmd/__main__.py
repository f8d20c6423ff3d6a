# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Entry point for running imgmd as a module.

Usage: python -m imgmd <file>
"""

import sys

from imgmd.cli import main

if __name__ == "__main__":
    sys.exit(main())
