import sys
import os
sys.path.append(os.path.abspath(os.path.dirname(__file__)))
from busy_indicator_demo.busy_indicator_demo_window import main

if __name__ == "__main__":
    sys.exit(main())
