"""
So that "python -m minipas" works the same as the "minipas" script.
"""
import sys
from .cmdline import main

sys.exit(main())
