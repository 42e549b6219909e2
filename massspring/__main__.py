"""Entry point: python -m massspring"""

import sys

from massspring.view.window import main

sys.exit(main())
