import sys

from img_tool.main import main

sys.exit(main())
