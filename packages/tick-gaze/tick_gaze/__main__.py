import sys

from tick_gaze.harness import main

sys.exit(main())
