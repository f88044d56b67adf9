#!/usr/bin/env python
"""Development server: hot reload, mock auth unless an API is configured."""

import logging
import os

# Sign in without a Reclaim API; export DEV__AUTH_MOCK=false to use API__URL.
os.environ.setdefault("DEV__AUTH_MOCK", "true")

from reclaim import main

if __name__ in {"__main__", "__mp_main__"}:
    logging.basicConfig(
        level=logging.INFO,
        format="%(name)s: %(message)s",
    )
    # Flow state transitions and redirect decisions
    logging.getLogger("reclaim.auth").setLevel(logging.DEBUG)
    # reclaim.auth.client already logs each authorize call
    logging.getLogger("httpx").setLevel(logging.WARNING)
    main()
