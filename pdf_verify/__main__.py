import sys

from pdf_verify.cli import main

sys.exit(main())
