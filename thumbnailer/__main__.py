import sys

from thumbnailer.adapters.inbound.cli import main

sys.exit(main())
