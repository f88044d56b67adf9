#!/usr/bin/env python
"""Production server: no hot reload, always talks to the configured API."""

import os

os.environ["RECLAIM_RELOAD"] = "0"
os.environ["DEV__AUTH_MOCK"] = "false"

from reclaim import main

if __name__ in {"__main__", "__mp_main__"}:
    main()
