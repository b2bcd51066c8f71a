# src/checkcommit/__main__.py
import sys

from checkcommit.main import main

sys.exit(main())
