import sys

from tourweather.cli import main

sys.exit(main())
