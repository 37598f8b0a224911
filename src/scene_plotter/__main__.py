import sys

from scene_plotter.cli import main

sys.exit(main())
