#!/usr/bin/env python3
"""TalkTimer entry point.

Run with:
    python main.py
    python -m talktimer
"""

from talktimer.__main__ import main


if __name__ == "__main__":
    main()
