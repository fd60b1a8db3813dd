import sys

from chatgpt_cli.cli import main

sys.exit(main())
