import sys

from .render_report import main

sys.exit(main())
