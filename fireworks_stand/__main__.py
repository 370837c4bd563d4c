import sys

from fireworks_stand.cli.main import main

sys.exit(main())
