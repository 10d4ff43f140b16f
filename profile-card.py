#!/usr/bin/env python3
from profilecard.runner import main


if __name__ == "__main__":
    main()
