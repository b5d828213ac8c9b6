import sys

from src.app.demo import main

sys.exit(main())
