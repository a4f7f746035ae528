# main.py
"""
Application entrypoint. Run from project root:
    python main.py            # interactive, groups of 3
    python main.py --batch < groups.txt
"""
from grouper.adapters.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
