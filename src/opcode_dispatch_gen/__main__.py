import sys

from opcode_dispatch_gen.cli import main

sys.exit(main())
