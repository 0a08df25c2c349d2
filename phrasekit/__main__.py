"""Allow running PhraseKit with ``python -m phrasekit``."""

import sys

from phrasekit.cli import main

sys.exit(main())
