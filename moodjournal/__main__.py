import sys

from moodjournal.cli import main

sys.exit(main())
