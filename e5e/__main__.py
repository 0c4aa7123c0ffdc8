#!/usr/bin/env python3
"""
e5e runtime executable.

    E5E_HANDLER=package.module:Handler python -m e5e <entrypoint> <event> <context>

This module is intentionally thin: it only bootstraps the runtime and exits
with its code.
"""

import sys

from e5e.sdk import main

if __name__ == "__main__":
    sys.exit(main())
