# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2026 The symmetric-hd Authors

"""
Main entry point for running symmetric_hd as a module.

Allows running:
    python -m symmetric_hd derive --secret 00ff... --path m/42/0/1/0
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
