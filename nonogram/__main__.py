# -*- coding: utf-8 -*-
"""python -m nonogram で CLI を起動します。"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
