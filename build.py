#!/usr/bin/env python3
from feedsite.cli import main

if __name__ == "__main__":
    main()
